"""
Language registry.

Static catalog of language identifiers and display names, plus lookup of the
optional per-language templates. Built once and shared read-only.
"""

from types import MappingProxyType
from typing import Mapping

from rulemorph.config.models import Language
from rulemorph.languages.templates import LANGUAGE_TEMPLATES, LanguageTemplate


_DEFAULT_LANGUAGES: tuple[Language, ...] = (
    Language(id="python", display_name="Python", comment_prefix="#"),
    Language(id="javascript", display_name="JavaScript"),
    Language(id="typescript", display_name="TypeScript"),
    Language(id="java", display_name="Java"),
    Language(id="kotlin", display_name="Kotlin"),
    Language(id="scala", display_name="Scala"),
    Language(id="cpp", display_name="C++"),
    Language(id="c", display_name="C"),
    Language(id="csharp", display_name="C#"),
    Language(id="go", display_name="Go"),
    Language(id="rust", display_name="Rust"),
    Language(id="swift", display_name="Swift"),
    Language(id="ruby", display_name="Ruby", comment_prefix="#"),
    Language(id="php", display_name="PHP"),
    Language(id="dart", display_name="Dart"),
    Language(id="r", display_name="R", comment_prefix="#"),
)


class LanguageRegistry:
    """Catalog of known languages and their templates."""

    def __init__(
        self,
        languages: tuple[Language, ...] = _DEFAULT_LANGUAGES,
        templates: Mapping[str, LanguageTemplate] = LANGUAGE_TEMPLATES,
    ):
        self._languages: Mapping[str, Language] = MappingProxyType(
            {lang.id: lang for lang in languages}
        )
        self._templates = templates

    def get(self, language_id: str) -> Language:
        """
        Get a catalog language by id.

        Raises:
            ValueError: If the language is not in the catalog
        """
        key = language_id.strip().lower()
        if key not in self._languages:
            raise ValueError(
                f"Unsupported language: {language_id}. "
                f"Supported languages: {list(self._languages.keys())}"
            )
        return self._languages[key]

    def resolve(self, language: Language | str) -> Language:
        """
        Resolve an id or Language to a Language without failing.

        Unknown ids become ad-hoc languages named after the id, which always
        take the generic translation path.
        """
        if isinstance(language, Language):
            return language
        key = language.strip().lower()
        if key in self._languages:
            return self._languages[key]
        return Language(id=key, display_name=language.strip() or "Unknown")

    def is_known(self, language_id: str) -> bool:
        return language_id.strip().lower() in self._languages

    def has_template(self, language_id: str) -> bool:
        return language_id.strip().lower() in self._templates

    def get_template(self, language_id: str) -> LanguageTemplate | None:
        return self._templates.get(language_id.strip().lower())

    def list_languages(self) -> list[Language]:
        """Get catalog languages in registration order."""
        return list(self._languages.values())


_default_registry = LanguageRegistry()


def get_registry() -> LanguageRegistry:
    """Get the process-wide default registry."""
    return _default_registry
