import atexit
import logging
import os

from flask import Flask

from views.watchlist import bp as watchlist_bp
from services.core import EXECUTOR
from services.watchlist import WatchlistState


def _configure_logging():
    level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )


def create_app(config=None):
    app = Flask(__name__)
    app.json.sort_keys = False
    # None means services.core.HTTP_TIMEOUT
    app.config['POKEAPI_TIMEOUT'] = None
    if config:
        app.config.update(config)

    # The page's state is owned by this app instance; nothing lives in module globals
    app.extensions['watchlist'] = WatchlistState()

    app.register_blueprint(watchlist_bp)
    return app


# In-flight lookups are fire-and-forget once the process is going away
atexit.register(EXECUTOR.shutdown, wait=False, cancel_futures=True)

_configure_logging()
app = create_app()


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    app.run(host='0.0.0.0', port=port, debug=True)
