"""vanityurls: serve Go vanity import paths from a reloadable configuration.

Maps custom import paths (``example.org/pkg``) to repositories and answers
with ``go-import``/``go-source`` meta tags.

Basic usage::

    from vanityurls import AppConfig, create_app

    app = create_app(AppConfig(config_path="vanity.yaml"))
    app.run()

Embedding with an in-memory configuration::

    from vanityurls import App, ConfigManager, StaticFetcher

    manager = ConfigManager(StaticFetcher({"paths": {"/pkg": {"repo": "https://github.com/acme/pkg"}}}))
    manager.load()
    app = App(manager)
"""

__version__ = "0.1.0"
__all__ = [
    "VCS",
    "App",
    "AppConfig",
    "CannotInferVCS",
    "CompileError",
    "ConfigManager",
    "ConfigModel",
    "ConfigurationError",
    "DuplicatePath",
    "EmptyPath",
    "FetchError",
    "FileFetcher",
    "HTTPError",
    "NegativeCacheAge",
    "NotFound",
    "PathEntry",
    "PathMatch",
    "RawConfig",
    "RenderError",
    "StaticFetcher",
    "URLFetcher",
    "UnknownVCS",
    "VanityError",
    "compile_config",
    "create_app",
    "resolve",
]

_ERRORS = (
    "CannotInferVCS",
    "CompileError",
    "ConfigurationError",
    "DuplicatePath",
    "EmptyPath",
    "FetchError",
    "HTTPError",
    "NegativeCacheAge",
    "NotFound",
    "RenderError",
    "UnknownVCS",
    "VanityError",
)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import vanityurls`` fast (no kida or yaml) while providing a
    clean top-level API.
    """
    if name in ("App", "create_app"):
        from vanityurls import app as _app

        return getattr(_app, name)

    if name == "AppConfig":
        from vanityurls.config import AppConfig

        return AppConfig

    if name == "ConfigManager":
        from vanityurls.lifecycle import ConfigManager

        return ConfigManager

    if name in ("VCS", "ConfigModel", "PathEntry", "RawConfig"):
        from vanityurls import model as _model

        return getattr(_model, name)

    if name == "compile_config":
        from vanityurls.compiler import compile_config

        return compile_config

    if name in ("PathMatch", "resolve"):
        from vanityurls import routing as _routing

        return getattr(_routing, name)

    if name in ("FileFetcher", "StaticFetcher", "URLFetcher"):
        from vanityurls import fetchers as _fetchers

        return getattr(_fetchers, name)

    if name in _ERRORS:
        from vanityurls import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
