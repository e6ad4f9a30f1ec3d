"""Template registry — maps a locale to its order approved template."""

from checkout.templates.order_approved import (
    OrderApprovedTemplate,
    PedidoAprovadoTemplate,
    format_amount,
)

TEMPLATE_REGISTRY: dict[str, type[OrderApprovedTemplate]] = {
    OrderApprovedTemplate.locale: OrderApprovedTemplate,
    PedidoAprovadoTemplate.locale: PedidoAprovadoTemplate,
}


def get_template(locale: str) -> type[OrderApprovedTemplate]:
    """Look up the order approved template for a locale."""
    template_cls = TEMPLATE_REGISTRY.get(locale)
    if template_cls is None:
        raise ValueError(f"No template registered for locale: {locale}")
    return template_cls


__all__ = ["TEMPLATE_REGISTRY", "OrderApprovedTemplate", "format_amount", "get_template"]
