"""Order approved template — sent once a paid order has been stored."""

from decimal import Decimal


def format_amount(amount: Decimal) -> str:
    """Render an amount without padding: 180.00 -> "180", 180.50 -> "180.5"."""
    text = format(amount.normalize(), "f")
    return "0" if text == "-0" else text


class OrderApprovedTemplate:
    locale = "en_US"
    currency_symbol = "$"
    subject = "Your Order has been Approved!"
    body = "Order {order_id} for the amount of {currency_symbol}{amount}"

    @classmethod
    def render(cls, context: dict, currency_symbol: str | None = None) -> dict:
        return {
            "subject": cls.subject,
            "body": cls.body.format(
                order_id=context["order_id"],
                currency_symbol=currency_symbol or cls.currency_symbol,
                amount=format_amount(context["amount"]),
            ),
        }


class PedidoAprovadoTemplate(OrderApprovedTemplate):
    locale = "pt_BR"
    currency_symbol = "R$"
    subject = "Seu Pedido foi Aprovado!"
    body = "Pedido {order_id} no valor de {currency_symbol}{amount}"
