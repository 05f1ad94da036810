# src/docs_kit/rendering/elements.py


def element(tag: str, css_class: str, inner: str, attrs: str = "") -> str:
    return f"<{tag}{_class_attr(css_class)}{attrs}>{inner}</{tag}>"


def void_element(tag: str, css_class: str) -> str:
    return f"<{tag}{_class_attr(css_class)} />"


def _class_attr(css_class: str) -> str:
    return f' class="{css_class}"' if css_class else ""
