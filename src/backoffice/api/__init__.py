"""Backoffice HTTP API package."""

# Re-exports are resolved lazily: Protean's domain traversal loads the
# submodules of this package on their own, and eager imports here would
# re-enter a submodule while it is still half-initialized.
_ROUTER_NAMES = ("category_router", "product_router", "customer_router", "cart_router", "invoice_router")

__all__ = [
    "ROUTERS",
    "cart_router",
    "category_router",
    "customer_router",
    "invoice_router",
    "product_router",
    "register_error_handlers",
]


def __getattr__(name):
    if name == "register_error_handlers":
        from backoffice.api.errors import register_error_handlers

        return register_error_handlers
    if name in _ROUTER_NAMES:
        from backoffice.api import routes

        return getattr(routes, name)
    if name == "ROUTERS":
        from backoffice.api import routes

        return [getattr(routes, router) for router in _ROUTER_NAMES]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
