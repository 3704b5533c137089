from flask import Flask

from .config import DefaultConfig, from_env
from .controllers.movements import bp as movements_bp
from .models.store import Store


def create_app(config: dict | None = None):
    app = Flask(__name__)
    app.config.from_object(DefaultConfig)
    app.config.update(from_env())
    app.config.update(config or {})

    store = app.config["STORE"] or Store.instance(app.config["DATA_PATH"])
    app.extensions["rental_store"] = store
    app.register_blueprint(movements_bp)

    return app
