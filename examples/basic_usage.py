#!/usr/bin/env python3
"""Example of basic browser usage."""

import sys

from custom_model_browser import (
    ROUTES,
    BrowserConfig,
    Category,
    CustomModelView,
    RegistryClient,
)


def print_card(endpoint, descriptor, gpu_available=None, is_custom=True, model_type="LLM"):
    """Print one registration the way a model card would show it."""
    gpu = "" if gpu_available is None else f" (gpu: {'yes' if gpu_available else 'no'})"
    print(f"  [{model_type}] {descriptor.get('model_name')}{gpu}")


def main():
    """Run the example."""
    endpoint = sys.argv[1] if len(sys.argv) > 1 else None
    search = sys.argv[2] if len(sys.argv) > 2 else None

    view = CustomModelView(
        RegistryClient(BrowserConfig(endpoint=endpoint)),
        card_renderer=print_card,
        gpu_available=True,
    )
    view.mount()
    if view.aggregator.last_error is not None:
        print(f"Could not load registrations: {view.aggregator.last_error}")
        return 1

    view.set_search_term(search)
    for route in ROUTES:
        print(Category.from_route(route).label)
        if view.render(route) == 0:
            print("  (none)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
