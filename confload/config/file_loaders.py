"""
Config File Loaders
===================

Deserializers turning one config file into a mapping, keyed by file
extension. YAML files may use three extra tags:

    password: !env DB_PASSWORD             # value of $DB_PASSWORD or None
    host: !env [DB_HOST, localhost]        # value of $DB_HOST or "localhost"
    plugins: !replace [cache, auth]        # replace the earlier list
    profiler: !unset                       # drop the earlier key
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, Union

import yaml

from .environment import env
from .exceptions import ConfigFormatError
from .merge import UNSET, ReplaceValue

FileLoader = Callable[[Path], Dict[str, Any]]


class ConfigYamlLoader(yaml.SafeLoader):
    """SafeLoader with ``!env``, ``!replace`` and ``!unset`` tags."""


def _construct_env(loader: ConfigYamlLoader, node: yaml.Node) -> Any:
    if isinstance(node, yaml.ScalarNode):
        return env(loader.construct_scalar(node))
    if isinstance(node, yaml.SequenceNode):
        args = loader.construct_sequence(node, deep=True)
        if 1 <= len(args) <= 2:
            return env(*args)
    raise yaml.constructor.ConstructorError(
        None, None,
        "!env expects a variable name or [name, default]",
        node.start_mark,
    )


def _construct_replace(loader: ConfigYamlLoader, node: yaml.Node) -> ReplaceValue:
    if isinstance(node, yaml.MappingNode):
        return ReplaceValue(loader.construct_mapping(node, deep=True))
    if isinstance(node, yaml.SequenceNode):
        return ReplaceValue(loader.construct_sequence(node, deep=True))
    if node.style in ("'", '"'):
        return ReplaceValue(loader.construct_scalar(node))
    # resolve the plain scalar tag so "!replace 3" stays an int
    tag = loader.resolve(yaml.ScalarNode, node.value, (True, False))
    plain = yaml.ScalarNode(tag, node.value, node.start_mark, node.end_mark)
    return ReplaceValue(loader.construct_object(plain, deep=True))


def _construct_unset(loader: ConfigYamlLoader, node: yaml.Node) -> Any:
    return UNSET


ConfigYamlLoader.add_constructor("!env", _construct_env)
ConfigYamlLoader.add_constructor("!replace", _construct_replace)
ConfigYamlLoader.add_constructor("!unset", _construct_unset)


def _check_mapping(path: Path, data: Any) -> Dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigFormatError(path, type(data))
    return data


def load_yaml(path: Path) -> Dict[str, Any]:
    with path.open('r', encoding='utf-8') as f:
        return _check_mapping(path, yaml.load(f, Loader=ConfigYamlLoader))


def load_json(path: Path) -> Dict[str, Any]:
    with path.open('r', encoding='utf-8') as f:
        return _check_mapping(path, json.load(f))


FILE_LOADERS: Dict[str, FileLoader] = {
    ".yaml": load_yaml,
    ".yml": load_yaml,
    ".json": load_json,
}


def get_file_loader(extension: str) -> FileLoader:
    """Return the loader registered for *extension* (e.g. ``.yaml``)."""
    try:
        return FILE_LOADERS[extension.lower()]
    except KeyError:
        supported = ", ".join(sorted(FILE_LOADERS))
        raise ValueError(
            f"Unsupported config file extension '{extension}'. Supported: {supported}"
        ) from None


def load_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Load one config file as a mapping, dispatching on its suffix."""
    path = Path(path)
    return get_file_loader(path.suffix)(path)
