from typing import List

from pydantic import ValidationError as SchemaError

from sitecanvas.domain.schemas import ElementIn, format_error_location


def element_violations(element: ElementIn, *, page_index: int, element_index: int, registry) -> List[str]:
    prefix = f"pages[{page_index}].elements[{element_index}]"
    spec = registry.resolve(element.type)

    if spec is None:
        return [f"{prefix}.type: unknown component type '{element.type}'"]

    try:
        spec.parse_config(element.config)
    except SchemaError as exc:
        return [
            f"{format_error_location(prefix + '.config', err['loc'])}: {err['msg']}"
            for err in exc.errors()
        ]

    return []
