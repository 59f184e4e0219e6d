import importlib.util
import inspect
import types

from onetimepad.pad_source import RandomIndexFn

PLUGIN_FUNC_NAME = "random_index"


class PadSourceLoadError(RuntimeError):
    pass


class PadSourceSignatureError(TypeError):
    pass


def load_module_from_file(module_file_path: str) -> types.ModuleType:
    """Import a pad source plugin from a Python file."""
    spec = importlib.util.spec_from_file_location("pad_source_plugin", module_file_path)
    if spec is None or spec.loader is None:
        raise PadSourceLoadError(f"Could not load spec for: {module_file_path}")
    plugin = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(plugin)  # executes user code
    except Exception as e:
        raise PadSourceLoadError(f"Could not import {module_file_path}: {e}") from e
    return plugin


def load_pad_source(module_file_path: str) -> RandomIndexFn:
    """Load a user defined random index source from a Python module file."""
    plugin = load_module_from_file(module_file_path)
    fn = getattr(plugin, PLUGIN_FUNC_NAME, None)
    if fn is None or not callable(fn):
        raise PadSourceLoadError(
            f"Plugin must define `{PLUGIN_FUNC_NAME}(size: int) -> int`"
        )

    sig = inspect.signature(fn)
    params = list(sig.parameters.values())
    if len(params) != 1 or params[0].kind not in (
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
    ):
        raise PadSourceSignatureError(
            f"{PLUGIN_FUNC_NAME} must accept exactly one positional arg: (size: int)"
        )
    return fn


def load_text(file_path: str, encoding: str = "utf-8") -> str:
    """Read a pad or message from a text file, dropping one trailing line break."""
    with open(file_path, "r", encoding=encoding, newline="") as f:
        text = f.read()
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text
