"""Heuristic categorization of registration descriptors.

Descriptors carry no trusted category tag, so the category is inferred from
which fields are present:

- rerank: ``model_type`` equals ``"rerank"`` (exact string equality)
- embedding: ``max_tokens`` and ``dimensions`` are both truthy
- LLM: anything else

The predicates are assumed to be mutually exclusive; nothing checks it. When a
descriptor satisfies both the rerank and the embedding predicate, ``classify``
answers rerank while both the rerank and embedding tabs list it.
"""

from typing import Any, Callable, Dict, List, Mapping

from .categories import Category

RERANK_MODEL_TYPE = "rerank"


def is_rerank(descriptor: Mapping[str, Any]) -> bool:
    return descriptor.get("model_type") == RERANK_MODEL_TYPE


def is_embedding(descriptor: Mapping[str, Any]) -> bool:
    # Presence and truthiness only; values are not range or type checked
    return bool(descriptor.get("max_tokens") and descriptor.get("dimensions"))


def is_llm(descriptor: Mapping[str, Any]) -> bool:
    """LLM tab predicate: excludes anything the other two tabs claim."""
    return not is_embedding(descriptor) and not is_rerank(descriptor)


def classify(descriptor: Mapping[str, Any]) -> Category:
    """Decide which category a descriptor belongs to.

    Args:
        descriptor: Registration descriptor from the detail endpoint

    Returns:
        Exactly one of ``Category.RERANK``, ``Category.EMBEDDING``, ``Category.LLM``
    """
    if is_rerank(descriptor):
        return Category.RERANK
    if is_embedding(descriptor):
        return Category.EMBEDDING
    return Category.LLM


TAB_PREDICATES: Dict[Category, Callable[[Mapping[str, Any]], bool]] = {
    Category.LLM: is_llm,
    Category.EMBEDDING: is_embedding,
    Category.RERANK: is_rerank,
}


def select_for_tab(collection: List[Dict[str, Any]], category: Category) -> List[Dict[str, Any]]:
    """Keep the descriptors shown under a category's tab, in collection order."""
    predicate = TAB_PREDICATES[category]
    return [descriptor for descriptor in collection if predicate(descriptor)]
