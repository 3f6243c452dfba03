from __future__ import annotations

from typing import Optional
import logging


def initialize_logger(logger_conf_file: Optional[str]=None):
    """Configures the ``logging`` module from a YAML dictConfig document.

    Args:
        logger_conf_file (Optional[str]): configuration file path. If omitted,
            the packaged 'conf/logger.yaml' is used.
    """
    import yaml
    import logging.config

    if logger_conf_file is None:
        import pkgutil
        logger_conf_text = pkgutil.get_data('conf', 'logger.yaml')
    else:
        with open(logger_conf_file, 'rt') as f:
            logger_conf_text = f.read()
    logger_conf = yaml.safe_load(logger_conf_text)
    logging.config.dictConfig(logger_conf)

def sub_logger(logger:Optional[logging.Logger], suffix:str) -> Optional[logging.Logger]:
    return logger.getChild(suffix) if logger else None
