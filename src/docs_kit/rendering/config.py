# src/docs_kit/rendering/config.py

from dataclasses import dataclass, field, fields


@dataclass(frozen=True)
class HtmlTheme:
    """CSS class strings attached to every element the renderer emits.

    Defaults are Tailwind utility classes. An empty string drops the
    ``class`` attribute entirely.
    """

    code_block: str = (
        "bg-gray-800 dark:bg-gray-900 text-gray-100 p-4 rounded-lg overflow-x-auto "
        "my-4 font-mono text-sm border border-gray-700 dark:border-gray-600"
    )
    table: str = (
        "min-w-full my-6 border-collapse border border-gray-300 "
        "dark:border-gray-600 rounded-lg overflow-hidden"
    )
    table_head: str = "bg-gray-200 dark:bg-gray-800"
    table_header_cell: str = (
        "px-6 py-3 text-left font-bold text-gray-800 dark:text-gray-100 "
        "border-b-2 border-gray-400 dark:border-gray-600"
    )
    table_row_even: str = "bg-white dark:bg-gray-900"
    table_row_odd: str = "bg-gray-50 dark:bg-gray-850"
    table_cell: str = (
        "px-6 py-4 text-gray-700 dark:text-gray-300 border-b border-gray-200 "
        "dark:border-gray-700"
    )
    heading_1: str = "text-2xl font-bold text-gray-800 dark:text-gray-100 mt-8 mb-4"
    heading_2: str = "text-xl font-bold text-gray-800 dark:text-gray-100 mt-6 mb-3"
    heading_3: str = "text-lg font-bold text-gray-800 dark:text-gray-100 mt-4 mb-2"
    heading_4: str = "text-base font-bold text-gray-800 dark:text-gray-100 mt-3 mb-2"
    rule: str = "my-6 border-gray-300 dark:border-gray-600"
    blockquote: str = (
        "border-l-4 border-blue-500 pl-4 my-4 italic text-gray-600 dark:text-gray-400"
    )
    list_item: str = "ml-6 mb-1 list-disc text-gray-700 dark:text-gray-300"
    ordered_list_item: str = "ml-6 mb-1 list-decimal text-gray-700 dark:text-gray-300"
    inline_code: str = (
        "bg-gray-200 dark:bg-gray-700 px-2 py-0.5 rounded text-sm font-mono "
        "text-purple-600 dark:text-purple-400"
    )
    strong: str = "font-semibold text-gray-900 dark:text-white"
    emphasis: str = "italic text-gray-700 dark:text-gray-300"
    link: str = "text-blue-600 dark:text-blue-400 hover:underline font-medium"
    paragraph: str = "mb-3 text-gray-700 dark:text-gray-300 leading-relaxed"

    @classmethod
    def unstyled(cls) -> "HtmlTheme":
        return cls(**{f.name: "" for f in fields(cls)})

    def heading(self, level: int) -> str:
        return getattr(self, f"heading_{level}")


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for the comment renderer.

    Immutable. Explicit. No magic defaults from environment.
    """

    default_language: str = "typescript"  # fenced blocks without a tag
    theme: HtmlTheme = field(default_factory=HtmlTheme)
    strip_audio_guides: bool = True

    def __post_init__(self) -> None:
        if not self.default_language.strip():
            raise ValueError("default_language must not be empty")
