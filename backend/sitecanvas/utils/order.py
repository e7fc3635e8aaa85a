def sort_by_order(items, order_field="order"):
    """
    Stable sort on a numeric order key.

    Order values are a sort key, not a dense index: gaps and duplicates are
    expected, and ties keep their original array position.
    """
    return sorted(items, key=lambda item: item[order_field])
