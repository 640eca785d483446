"""Order tracking — status updates and a customer's order history."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from ordering.domain import logger, ordering
from ordering.order.order import Order

# Upper bound on one customer's order history load
ORDER_HISTORY_LIMIT = 500


@ordering.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    status = String(required=True, max_length=50)


@ordering.command_handler(part_of=Order)
class OrderTrackingHandler:
    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.update_status(command.status)
        repo.add(order)
        logger.info("order_status_updated", order_id=str(order.id), status=order.status)


def orders_for_customer(customer_id):
    """A customer's orders, most recently placed first."""
    repo = current_domain.repository_for(Order)
    orders = repo._dao.query.filter(customer_id=str(customer_id)).limit(ORDER_HISTORY_LIMIT).all().items
    return sorted(orders, key=lambda order: order.placed_at, reverse=True)
