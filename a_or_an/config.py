"""
Options that affect how articles are chosen.

:class:`ConfigSection` is a small recipe for declaring validated option classes: each option is defined with the
:class:`ConfigItem` descriptor, which provides a default value and type normalization.  Unknown option names are
rejected with :class:`InvalidConfigError`.
"""

from __future__ import annotations

from collections import ChainMap
from typing import Union, Callable, Iterable, Any, Mapping, Type, Generic, TypeVar, overload

__all__ = ['ConfigItem', 'ConfigSection', 'Options', 'ConfigException', 'InvalidConfigError', 'OptionsLike']

CV = TypeVar('CV')
ConfigMap = Union[Mapping[str, Any], 'ConfigSection', None]
OptionsLike = Union['Options', Mapping[str, Any], None]


class ConfigItem(Generic[CV]):
    __slots__ = ('name', 'type', 'default')

    def __init__(self, default: CV, type: Callable[[Any], CV] = None):  # noqa
        self.type = type
        self.default = default

    def __set_name__(self, owner: Type[ConfigSection], name: str):
        self.name = name
        owner._config_items_[name] = self

    @overload
    def __get__(self, instance: None, owner: Type[ConfigSection]) -> ConfigItem[CV]:
        ...

    @overload
    def __get__(self, instance: ConfigSection, owner: Type[ConfigSection]) -> CV:
        ...

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return instance.__dict__.get(self.name, self.default)

    def __set__(self, instance: ConfigSection, value: Any):
        if self.type is not None:
            value = self.type(value)
        instance.__dict__[self.name] = value

    def __delete__(self, instance: ConfigSection):
        try:
            del instance.__dict__[self.name]
        except KeyError as e:
            raise AttributeError(f'No {self.name!r} config was stored for {instance}') from e

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__}({self.default!r}, type={self.type!r})>'


class ConfigMeta(type):
    """
    Metaclass for ConfigSections.  Necessary to initialize the ``_config_items_`` dict for ConfigItem registration
    because the contents of a class is evaluated before ``__init_subclass__`` is called.
    """
    _config_items_: dict[str, ConfigItem]

    @classmethod
    def __prepare__(mcs, name: str, bases: Iterable[type], **kwargs) -> dict[str, Any]:
        config_items = {}
        for base in bases:
            if isinstance(base, mcs):
                config_items.update(base._config_items_)
        return {'_config_items_': config_items}


class ConfigSection(metaclass=ConfigMeta):
    _config_items_: dict[str, ConfigItem]

    def __init__(self, config: ConfigMap = None, **kwargs):
        self.update(config, **kwargs)

    def update(self, config: ConfigMap = None, **kwargs):
        """
        :param config: A dict or other mapping containing values that should be used in this section
        :param kwargs: Additional keyword arguments for values that should be used in this section
        """
        if isinstance(config, ConfigSection):
            config = config.__dict__
        if not (config_map := ChainMap(kwargs, config) if config and kwargs else (config or kwargs)):
            return
        if bad := set(config_map).difference(self._config_items_):
            raise InvalidConfigError(f'Invalid configuration - unsupported options: {", ".join(sorted(bad))}')
        for key, val in config_map.items():
            setattr(self, key, val)

    def __contains__(self, key: str) -> bool:
        """True if a non-default value was stored for the given key"""
        return key in self.__dict__

    def __getitem__(self, key: str):
        if key not in self._config_items_:
            raise KeyError(key)
        return getattr(self, key)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ConfigSection):
            return NotImplemented
        return type(self) is type(other) and self.as_dict() == other.as_dict()

    def __repr__(self) -> str:
        settings = ', '.join(f'{k}={v!r}' for k, v in sorted(self.as_dict().items()))
        return f'<{self.__class__.__name__}({settings})>'

    def as_dict(self, include_defaults: bool = True) -> dict[str, Any]:
        keys = self._config_items_ if include_defaults else self.__dict__
        return {key: getattr(self, key) for key in keys}


_BOOL_STRS = {
    'true': True, 'yes': True, 'on': True, '1': True, 'false': False, 'no': False, 'off': False, '0': False, '': False,
}


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        try:
            return _BOOL_STRS[value.strip().lower()]
        except KeyError:
            raise InvalidConfigError(f'Invalid configuration - expected a boolean value, but found {value!r}') from None
    elif isinstance(value, (bool, int)) or value is None:
        return bool(value)
    raise InvalidConfigError(f'Invalid configuration - expected a boolean value, but found {value!r}')


class Options(ConfigSection):
    """
    :param numbers_are_colloquial: If True, then a 4 digit number like ``1800`` is treated as "eighteen hundred", so
      it uses "an".  By default, it is treated as "one thousand eight hundred", so it uses "a".  Strings are parsed
      (``'true'``/``'false'``, ``'yes'``/``'no'``, ``'on'``/``'off'``, ``'1'``/``'0'``), and any other string raises
      :class:`InvalidConfigError`.
    """

    numbers_are_colloquial: bool = ConfigItem(False, type=_to_bool)

    @classmethod
    def with_colloquial(cls) -> Options:
        return cls(numbers_are_colloquial=True)

    @classmethod
    def normalize(cls, options: OptionsLike = None) -> Options:
        """Returns the given Options, or a new Options object initialized from the given mapping / defaults."""
        if isinstance(options, cls):
            return options
        return cls(options)


# region Exceptions


class ConfigException(Exception):
    """Base exception for config-related errors"""


class InvalidConfigError(ConfigException):
    """Raised when invalid config items are provided when initializing a ConfigSection"""


# endregion
