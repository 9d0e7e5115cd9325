"""Quiz scoring: plurality vote over the products behind chosen answers."""

from collections import Counter


def recommend_product(product_ids):
    """Return the product id chosen most often, or None when nothing voted.

    ``product_ids`` lists the product behind each chosen option, in answer
    order; ``None`` entries abstain. Ties go to the product that was voted for
    first.
    """
    votes = Counter(pid for pid in product_ids if pid is not None)
    if not votes:
        return None
    # Counter preserves first-insertion order and max() keeps the first maximum
    return max(votes, key=votes.__getitem__)
