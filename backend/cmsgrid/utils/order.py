def orders_are_compact(items, order_field="order"):
    """
    True when the order values of items are exactly 1..N.
    """
    orders = sorted(getattr(item, order_field) for item in items)
    return orders == list(range(1, len(orders) + 1))
