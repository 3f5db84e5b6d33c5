"""Utilities for declaratively registering dashboard modules.

Each blueprint-backed screen is described with metadata so that registration
and the sidebar navigation are driven from one list.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from flask import Blueprint, Flask
from werkzeug.utils import import_string


@dataclass(frozen=True)
class ModuleDefinition:
    """Describe how a blueprint-backed module is registered with the app."""

    import_path: str
    attribute: str
    url_prefix: Optional[str] = None
    version: str = "1.0"
    display_name: Optional[str] = None
    endpoint: Optional[str] = None

    def load_blueprint(self) -> Blueprint:
        """Import and return the blueprint described by this definition."""

        module = import_string(self.import_path)
        blueprint = getattr(module, self.attribute, None)
        if not isinstance(blueprint, Blueprint):
            raise TypeError(
                "Expected attribute '%s' in '%s' to be a Flask Blueprint, got %r instead"
                % (self.attribute, self.import_path, type(blueprint))
            )
        return blueprint


def register_modules(app: Flask, modules: Sequence[ModuleDefinition]) -> None:
    """Register all modules in the provided iterable with the Flask app."""

    for module in modules:
        blueprint = module.load_blueprint()
        app.register_blueprint(blueprint, url_prefix=module.url_prefix)
        app.logger.debug(
            "Registered module %s (version %s) at prefix %s",
            module.import_path,
            module.version,
            module.url_prefix or "<root>",
        )


def register_default_modules(app: Flask) -> None:
    """Convenience helper that registers the built-in dashboard modules."""

    register_modules(app, DEFAULT_MODULES)


def navigation_entries() -> list[ModuleDefinition]:
    """Modules that appear in the sidebar, in declaration order."""

    return [module for module in DEFAULT_MODULES if module.display_name and module.endpoint]


DEFAULT_MODULES: Iterable[ModuleDefinition] = (
    ModuleDefinition("topup_admin.modules.auth", "auth_bp", url_prefix="/auth"),
    ModuleDefinition("topup_admin.popups", "popups_bp", url_prefix="/popups"),
    ModuleDefinition(
        "topup_admin.modules.dashboard", "dashboard_bp",
        display_name="Dashboard", endpoint="dashboard.index",
    ),
    ModuleDefinition(
        "topup_admin.modules.users", "users_bp", url_prefix="/users",
        display_name="Users", endpoint="users.list_users",
    ),
    ModuleDefinition(
        "topup_admin.modules.products", "products_bp", url_prefix="/products",
        display_name="Products", endpoint="products.list_products",
    ),
    ModuleDefinition(
        "topup_admin.modules.orders", "orders_bp", url_prefix="/orders",
        display_name="Orders", endpoint="orders.list_orders",
    ),
    ModuleDefinition(
        "topup_admin.modules.coupons", "coupons_bp", url_prefix="/coupons",
        display_name="Coupons", endpoint="coupons.list_coupons",
    ),
    ModuleDefinition(
        "topup_admin.modules.payment_methods", "payment_methods_bp", url_prefix="/payment-methods",
        display_name="Payment methods", endpoint="payment_methods.list_methods",
    ),
    ModuleDefinition(
        "topup_admin.modules.diamond_price", "diamond_price_bp", url_prefix="/diamond-price",
        display_name="Diamond price", endpoint="diamond_price.list_prices",
    ),
    ModuleDefinition(
        "topup_admin.modules.banners", "banners_bp", url_prefix="/banners",
        display_name="Banners", endpoint="banners.list_banners",
    ),
    ModuleDefinition(
        "topup_admin.modules.articles", "articles_bp", url_prefix="/articles",
        display_name="Articles", endpoint="articles.list_articles",
    ),
    ModuleDefinition(
        "topup_admin.modules.design_services", "design_services_bp", url_prefix="/design-services",
        display_name="Design services", endpoint="design_services.list_services",
    ),
    ModuleDefinition(
        "topup_admin.modules.game_content", "game_content_bp", url_prefix="/game-content",
        display_name="Game content", endpoint="game_content.list_games",
    ),
    ModuleDefinition(
        "topup_admin.modules.feedback", "feedback_bp", url_prefix="/feedback",
        display_name="Feedback", endpoint="feedback.list_feedback",
    ),
    ModuleDefinition(
        "topup_admin.modules.tech_works", "tech_works_bp", url_prefix="/tech-works",
        display_name="Maintenance", endpoint="tech_works.index",
    ),
)
