from flask import Flask

from flask_app.blueprints.orders.routes import orders_bp
from flask_app.blueprints.analytics.routes import analytics_bp
from flask_app.blueprints.menu.routes import menu_bp
from flask_app.blueprints.admin.routes import admin_bp
from flask_app.blueprints.bot.routes import bot_bp


def register_blueprints(app: Flask):
    app.register_blueprint(orders_bp)
    app.register_blueprint(analytics_bp)
    app.register_blueprint(menu_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(bot_bp)

    @app.route("/api/health", methods=["GET"])
    def health():
        return {"status": "ok"}, 200
