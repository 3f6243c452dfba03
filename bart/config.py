from __future__ import annotations

from typing import Optional, Union
from pathlib import Path

from argparse import Namespace
from omegaconf import OmegaConf


def load(config_path:Union[str,Path]) -> OmegaConf:
    config_path = Path(config_path) if isinstance(config_path, str) else config_path
    return OmegaConf.load(config_path)


def to_conf(value:Union[dict[str,object],Namespace,OmegaConf,None]=None) -> OmegaConf:
    if value is None:
        return OmegaConf.create()
    elif OmegaConf.is_config(value):
        return value
    elif isinstance(value, Namespace):
        return OmegaConf.create(vars(value))
    elif isinstance(value, dict):
        return OmegaConf.create(value)
    else:
        raise ValueError(f'invalid configuration: {value}')


def get_parent(conf:OmegaConf, key:str) -> tuple[Optional[OmegaConf], str]:
    last_idx = key.rfind('.')
    if last_idx >= 0:
        return OmegaConf.select(conf, key[:last_idx]), key[last_idx+1:]
    else:
        return conf, key


def exists(conf:OmegaConf, key:str) -> bool:
    # a key holding null still exists
    parent, leaf = get_parent(conf, key)
    return OmegaConf.is_dict(parent) and leaf in parent.keys()


def get(conf:OmegaConf, key:str, *, default:Optional[object]=None) -> object:
    return OmegaConf.select(conf, key, default=default)


def to_dict(conf:OmegaConf) -> dict[str,object]:
    return OmegaConf.to_container(conf)
