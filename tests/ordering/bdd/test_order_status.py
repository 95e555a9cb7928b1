"""BDD tests for the order status machine."""

from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, scenarios, then, when

scenarios("features/order_status.feature")


@given(
    parsers.cfparse('an order from "{name}" worth {total:d} has been placed'),
    target_fixture="order_id",
)
def order_placed(backend, name, total):
    order = backend.create_order(
        customer_name=name,
        phone="01700000000",
        address="House 12, Road 5, Dhaka",
        items=[{"product_id": "rice", "product_name": "Organic Rice", "price": total, "quantity": 1}],
        total_amount=total,
    )
    return str(order.id)


@when(parsers.cfparse('the admin marks the order "{status}"'))
def admin_marks_order(backend, order_id, error, status):
    try:
        backend.update_order_status(order_id, status)
    except ValidationError as exc:
        error["exc"] = exc


@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(backend, order_id, status):
    assert backend.get_order(order_id).status == status


@then(parsers.cfparse("total sales are {total:d}"))
def total_sales_are(backend, total):
    assert backend.get_order_stats().total_sales == total


@then("the admin is told the status is invalid")
def status_is_invalid(error):
    assert error["exc"] is not None
    assert "status" in error["exc"].messages
