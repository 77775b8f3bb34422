import copy
from threading import Lock
from . import __version__

from typing import Any, Optional


default_config = {
    'daemon': {
        'port': 5999,
        'rpc_path': '/RPC2',
        'stop_all_flow_id': -1,  # daemon treats this flow id as "every flow"
    },
    'address': {
        'max_length': 950,
    },
    'rpc': {
        'user_agent': f'Flowgrind/{__version__}',
    },
}

_conf_cache = None
_glock = Lock()


def get_config() -> "Config":
    global _glock, _conf_cache
    with _glock:
        if _conf_cache is None:
            _conf_cache = Config()
        return _conf_cache


def set_config_overrides(overrides=None):
    """
    convenient method to set config's overrides without actually creating config object explicitly

    :param overrides: nested dict, same shape as default_config
    """
    get_config().set_overrides(overrides)


class Config:
    """
    in-memory configuration: built-in defaults plus overrides.
    there is no file backend, options are addressed by dotted names, like daemon.port
    """
    class OverrideNotFound(RuntimeError):
        pass

    def __init__(self, defaults: Optional[dict] = None, overrides: Optional[dict] = None):
        self.__conf_lock = Lock()
        self.__stuff = copy.deepcopy(defaults if defaults is not None else default_config)
        self.__overrides = {}
        self.set_overrides(overrides)

    def set_overrides(self, overrides: Optional[dict]) -> None:
        """
        sets overrides to a prepared dictionary of items.
        :param overrides:
        """
        with self.__conf_lock:
            if overrides is not None:
                self.__overrides = copy.deepcopy(overrides)
            else:
                self.__overrides = {}

    def set_override(self, option_name: str, val: Any) -> None:
        """
        set one item override
        :param option_name: option path, like foo.bar.cat.dog
        :param val: any value
        :return:
        """
        names = self._split_config_names(option_name)
        with self.__conf_lock:
            clevel = self.__overrides
            for name in names[:-1]:
                if name not in clevel:
                    clevel[name] = {}
                clevel = clevel[name]
            clevel[names[-1]] = val

    def _get_option_in_overrides(self, option_name: str):
        clevel = self.__overrides
        for name in self._split_config_names(option_name):
            if not isinstance(clevel, dict) or name not in clevel:
                raise Config.OverrideNotFound()
            clevel = clevel[name]
        return clevel

    def has_option_noasync(self, option_name: str) -> bool:
        class _SomethingStrangeL:
            pass
        return self.get_option_noasync(option_name, default_val=_SomethingStrangeL) is not _SomethingStrangeL

    @staticmethod
    def _split_config_names(option_name: str):
        names = tuple(option_name.split('.'))
        if any(name == '' for name in names):
            raise ValueError(f'"{option_name}" is not a valid option_name')
        return names

    def get_option_noasync(self, option_name: str, default_val: Any = None) -> Any:
        with self.__conf_lock:
            try:
                return copy.deepcopy(self._get_option_in_overrides(option_name))
            except Config.OverrideNotFound:
                pass
            clevel = self.__stuff
            for name in self._split_config_names(option_name):
                if not isinstance(clevel, dict) or name not in clevel:
                    return default_val
                clevel = clevel[name]

            return copy.deepcopy(clevel)
