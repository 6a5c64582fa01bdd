"""spellscope - Cascading spell checker configuration (global, solution, project)"""

__version__ = "1.0.0"
__description__ = "Cascading spell checker configuration (global, solution, project)"

__all__ = [
    "main",
    "BufferConfigurationCache",
    "ConfigurationCascade",
    "EffectiveConfiguration",
    "__version__",
]


def __getattr__(name: str):
    """Lazy import so importing the package does not read .env.

    Only ``spellscope.config`` loads the environment; the core modules can
    be used without it.
    """
    if name == "main":
        from .main import main

        return main
    if name == "BufferConfigurationCache":
        from .core.buffer_cache import BufferConfigurationCache

        return BufferConfigurationCache
    if name == "ConfigurationCascade":
        from .core.cascade import ConfigurationCascade

        return ConfigurationCascade
    if name == "EffectiveConfiguration":
        from .core.config_model import EffectiveConfiguration

        return EffectiveConfiguration
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
