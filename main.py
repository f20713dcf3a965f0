# main.py
"""Resource browser entry script.

Usage:
    python main.py [-v] [--readonly] [--config=PATH] [--server=URL]
                   [--resource=apps/v1/deployments] [--namespace=NS]

The API server must be reachable over HTTP(S), for example through
`kubectl proxy`. Exits with code 1 on startup failure.
"""
import logging
import signal
import sys
from pathlib import Path
from typing import Dict, Optional

from resource_browser.BrowserConfig import load_config
from resource_browser.LoggingSetup import setup_logging
from resource_browser.PathResolver import PathResolver

DEFAULT_RESOURCE = "apps/v1/deployments"


# ============================================================================
# RESOLVE PATHS AT MODULE LOAD TIME
# ============================================================================
if hasattr(sys.modules['__main__'], '__file__'):
    SCRIPT_PATH = Path(sys.modules['__main__'].__file__).resolve()
else:
    SCRIPT_PATH = Path(__file__).resolve()

_path_resolver = PathResolver(SCRIPT_PATH)
PATHS = _path_resolver.paths


def parse_args(argv) -> Dict:
    """Parse CLI arguments.

    Returns:
        Dictionary with verbose, read_only, config, server, resource, namespace
    """
    args = {
        'verbose': "-v" in argv,
        'read_only': "--readonly" in argv,
        'config': None,
        'server': None,
        'resource': DEFAULT_RESOURCE,
        'namespace': "",
    }
    for arg in argv[1:]:
        for name in ('config', 'server', 'resource', 'namespace'):
            prefix = f"--{name}="
            if arg.startswith(prefix):
                args[name] = arg.split("=", 1)[1]
    return args


def apply_overrides(config: Dict, args: Dict) -> Dict:
    """Apply command line overrides to the loaded config."""
    if args['read_only']:
        config['browser']['read_only'] = True
    if args['server']:
        config['connection']['server'] = args['server']
    return config


def build_viewer(app, resource: str, namespace: str):
    """Create the viewer for `resource`, extended with pause/resume when the kind supports it."""
    from resource_browser.dao import Gvr, Pausable, accessor_for
    from resource_browser.view import Browser, PauseExtender

    gvr = Gvr.parse(resource)
    viewer = Browser(app, gvr, namespace)
    if isinstance(accessor_for(app.factory, gvr), Pausable):
        return PauseExtender(viewer)
    return viewer


if __name__ == "__main__":
    window = None
    try:
        args = parse_args(sys.argv)
        is_frozen = getattr(sys, 'frozen', False)

        _path_resolver.ensure_local_dir_structure()
        setup_logging(PATHS.logs_dir, verbose=args['verbose'], is_frozen=is_frozen)

        config_path: Optional[Path] = Path(args['config']) if args['config'] else _path_resolver.get_config_path()
        config = apply_overrides(load_config(config_path), args)

        from resource_browser.dao import KubeClient
        from resource_browser.view import App
        from resource_browser.view.AppWindow import AppWindow

        app = App(config, KubeClient.from_config(config))
        viewer = build_viewer(app, args['resource'], args['namespace'])

        window = AppWindow(viewer)
        window.start()

        root = window.get_root()

        def _on_window_close() -> None:
            window.stop()
            root.quit()

        root.protocol("WM_DELETE_WINDOW", _on_window_close)
        signal.signal(signal.SIGINT, lambda *_: _on_window_close())

        root.mainloop()
        sys.exit(0)

    except KeyboardInterrupt:
        logging.info("Browser interrupted.")
        sys.exit(0)
    except SystemExit:
        raise
    except Exception as exc:
        logging.error("Browser ERROR: %s: %s", type(exc).__name__, exc)
        import traceback
        logging.error(traceback.format_exc())
        sys.exit(1)
