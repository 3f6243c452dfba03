from .mock_shell import MockShell
