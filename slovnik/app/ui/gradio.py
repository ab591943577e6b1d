"""Search-as-you-type front-end built with Gradio Blocks."""

from __future__ import annotations

from typing import List, Sequence, Tuple

import gradio as gr

from slovnik.core import REPLACEABLE_LETTERS, LanguageKey, RenderStyle, SearchType

from ..services.dictionary_service import DictionaryService

FROM_ISV = "isv → language"
TO_ISV = "language → isv"

_STYLE_CHOICES = [
    ("Standard", RenderStyle.STANDARD.value),
    ("Etymological", RenderStyle.ETYMOLOGICAL.value),
    ("Southern", RenderStyle.SOUTHERN.value),
]
_POS_CHOICES = ["", "noun", "verb", "adj", "adv", "pron", "num", "prep", "conj"]


def _translation_languages() -> List[str]:
    return [
        key.value for key in LanguageKey if key not in (LanguageKey.ISV, LanguageKey.ISV_SRC)
    ]


def resolve_direction(direction: str, language: str) -> Tuple[str, str]:
    """Return ``(from_lang, to_lang)`` for the direction selector."""

    if direction == TO_ISV:
        return language, LanguageKey.ISV.value
    return LanguageKey.ISV.value, language


def _render_statistics(service: DictionaryService) -> str:
    statistics = service.get_completion_statistics()
    if not statistics:
        return ""
    chunks = [f"`{lang}` {percent}%" for lang, percent in statistics.items()]
    return "**Checked translations:** " + ", ".join(chunks)


def create_interface(service: DictionaryService) -> gr.Blocks:
    """Construct the interactive Gradio Blocks UI."""

    def run_search(
        text: str,
        direction: str,
        language: str,
        search_type: str,
        style: str,
        pos_filter: str,
    ) -> str:
        from_lang, to_lang = resolve_direction(direction, language)
        records = service.search_and_format(
            text or "",
            from_lang,
            to_lang,
            search_type=search_type,
            pos_filter=pos_filter or "",
            style=style,
        )
        return service.formatter.render_markdown(records, text or "")

    def update_folding(
        letters: Sequence[str] | None,
        text: str,
        direction: str,
        language: str,
        search_type: str,
        style: str,
        pos_filter: str,
    ) -> str:
        selected = set(letters or [])
        service.set_folding_configuration(
            [pair for pair in REPLACEABLE_LETTERS if pair[0] in selected]
        )
        return run_search(text, direction, language, search_type, style, pos_filter)

    with gr.Blocks(title="Slovnik: Interslavic dictionary") as demo:
        gr.Markdown("## Medžuslovjansky slovnik")
        gr.Markdown(_render_statistics(service))

        with gr.Row():
            direction = gr.Radio(choices=[FROM_ISV, TO_ISV], value=FROM_ISV, label="Direction")
            language = gr.Dropdown(
                choices=_translation_languages(),
                value=LanguageKey.EN.value,
                label="Language",
            )
        query = gr.Textbox(
            label="Search",
            placeholder="Type a word, e.g. 'dom -p noun' or 'dom -b'",
        )
        with gr.Row():
            search_type = gr.Radio(
                choices=[item.value for item in SearchType],
                value=SearchType.BEGIN.value,
                label="Match",
            )
            style = gr.Dropdown(
                choices=_STYLE_CHOICES,
                value=RenderStyle.STANDARD.value,
                label="Orthography",
            )
            pos_filter = gr.Dropdown(choices=_POS_CHOICES, value="", label="Part of speech")
        folding = gr.CheckboxGroup(
            choices=[source for source, _ in REPLACEABLE_LETTERS],
            value=list(service.engine.folding.sources),
            label="Letters to keep distinct",
        )
        results = gr.Markdown(service.formatter.render_markdown([]))

        inputs = [query, direction, language, search_type, style, pos_filter]
        for control in inputs:
            control.change(run_search, inputs=inputs, outputs=results)
        folding.change(update_folding, inputs=[folding, *inputs], outputs=results)

    return demo


__all__ = ["create_interface", "resolve_direction"]
