"""Line-oriented command interpreter.

Turns ``create_order P1 3`` into a call on the session's handler and
the handler's DTO into a one-line response.  Converting the string
parameters to numbers happens here; every range rule is left to the
domain's value objects.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ledger.application.session import LedgerSession

logger = logging.getLogger(__name__)


class CommandError(Exception):
    """The line could not be turned into a command call."""


def _to_int(raw: str, message: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise CommandError(message)


def _to_float(raw: str, message: str) -> float:
    try:
        return float(raw)
    except ValueError:
        raise CommandError(message)


class CommandInterpreter:

    def __init__(self, session: LedgerSession) -> None:
        self._session = session
        self._commands: dict[str, tuple[int, Callable[[list[str]], str]]] = {
            "create_product": (3, self._create_product),
            "get_product_info": (1, self._get_product_info),
            "create_order": (2, self._create_order),
            "create_campaign": (5, self._create_campaign),
            "get_campaign_info": (1, self._get_campaign_info),
            "increase_time": (1, self._increase_time),
        }

    @property
    def command_names(self) -> list[str]:
        return sorted(self._commands)

    def execute(self, line: str) -> str | None:
        """Run one line; blank lines yield None."""
        args = line.split()
        if not args:
            return None
        return self.run(args)

    def run(self, args: list[str]) -> str:
        """Dispatch ``[command, *params]``.

        Raises CommandError for unknown commands, wrong arity and
        unparsable numbers; domain errors propagate unchanged.
        """
        name, params = args[0], args[1:]
        try:
            arity, command = self._commands[name]
        except KeyError:
            raise CommandError("Command not found")
        if len(params) != arity:
            raise CommandError("Invalid parameters")

        logger.debug("running %s %s", name, params)
        return command(params)

    # --- Commands -------------------------------------------------------------

    def _create_product(self, params: list[str]) -> str:
        code = params[0]
        price = _to_float(params[1], "Price must be float")
        stock = _to_int(params[2], "Stock must be integer")

        dto = self._session.create_product.handle(code, price, stock)
        return (
            f"Product created; code {dto.code}, price {dto.price:.1f}, "
            f"stock {dto.stock}"
        )

    def _get_product_info(self, params: list[str]) -> str:
        dto = self._session.get_product_info.handle(params[0])
        return f"Product {dto.code} info; price {dto.price:.1f}, stock {dto.stock}"

    def _create_order(self, params: list[str]) -> str:
        code = params[0]
        quantity = _to_int(params[1], "Quantity must be integer")

        dto = self._session.create_order.handle(code, quantity)
        return f"Order created; product {dto.product_code}, quantity {dto.quantity}"

    def _create_campaign(self, params: list[str]) -> str:
        name, code = params[0], params[1]
        duration = _to_int(params[2], "Duration must be integer")
        limit = _to_int(params[3], "Limit must be integer")
        target = _to_int(params[4], "Target sales must be integer")

        dto = self._session.create_campaign.handle(name, code, duration, limit, target)
        return (
            f"Campaign created; name {dto.name}, product {dto.product_code}, "
            f"duration {dto.duration}, limit {dto.price_manipulation_limit}, "
            f"target sales count {dto.target_sales_count}"
        )

    def _get_campaign_info(self, params: list[str]) -> str:
        dto = self._session.get_campaign_info.handle(params[0])
        return (
            f"Campaign {dto.name} info; Status {dto.status}, "
            f"Target Sales {dto.target_sales_count}, Total Sales {dto.total_sales}, "
            f"Turnover {dto.turnover:.1f}, "
            f"Average Item Price {dto.average_item_price:.1f}"
        )

    def _increase_time(self, params: list[str]) -> str:
        hours = _to_int(params[0], "Hour must be integer")

        dto = self._session.increase_time.handle(hours)
        return f"Time is {dto.display}"
