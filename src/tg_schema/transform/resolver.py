# src/tg_schema/transform/resolver.py

"""Second stage: turn free-text type cells into `Primitive` values.

The type column of the documentation is prose, not a type language.
Width of integers, optionality and a few sum types are only stated in
the neighbouring description, so the resolver looks at all three cells
of a row: field name, type text and description.
"""

import logging
import re

from tg_schema.primitives import (
    Array,
    Bool,
    ChatId,
    Float32,
    InputFile,
    Int32,
    Int64,
    Optional,
    ParseMode,
    Primitive,
    Str,
    Struct,
    TrueLiteral,
)

logger = logging.getLogger(__name__)

OPTIONAL_PREFIX = "Optional. "
ARRAY_PREFIX = "Array of "

_SENTENCE_SPLIT = re.compile(r"(?<=[.!?])\s+")
_WORD = re.compile(r"[A-Za-z][A-Za-z0-9_]*")

# Capitalised words that open or fill a "returns" sentence without naming a type
_RETURN_STOPWORDS = frozenset(
    {
        "On",
        "Returns",
        "Return",
        "Use",
        "If",
        "In",
        "Otherwise",
        "The",
        "A",
        "An",
        "Note",
        "Bot",
        "Bots",
        "Telegram",
        "HTTP",
        "URL",
        "ID",
        "API",
    }
)


def resolve_type(field_name: str, type_text: str, description: str) -> tuple[Primitive, str]:
    """Resolve one table row into a primitive and a cleaned description.

    The "Optional. " prefix is moved out of the description and into an
    `Optional` wrapper; every other branch leaves the description as is.
    Unknown type text is never an error and becomes a `Struct` reference.
    """
    if description.startswith(OPTIONAL_PREFIX):
        inner, cleaned = resolve_type(
            field_name, type_text, description[len(OPTIONAL_PREFIX) :]
        )
        return Optional(inner), cleaned

    if type_text.startswith(" "):
        return resolve_type(field_name, type_text[1:], description)

    if type_text.startswith(ARRAY_PREFIX):
        # slicing at 8 leaves the separating space for the branch above
        item, cleaned = resolve_type(field_name, type_text[8:], description)
        return Array(item), cleaned

    return _dispatch(field_name, type_text, description), description


def _dispatch(field_name: str, type_text: str, description: str) -> Primitive:
    if type_text == "Integer":
        return Int64() if "64" in description else Int32()
    if type_text == "String":
        return ParseMode() if field_name == "parse_mode" else Str()
    if type_text == "Boolean":
        return Bool()
    if type_text == "True":
        return TrueLiteral()
    if type_text == "Integer or String":
        return ChatId()
    if type_text in ("Float", "Float number"):
        return Float32()
    if type_text == "InputFile or String":
        return InputFile()
    return Struct(name=type_text)


def resolve_return_type(description: str) -> Primitive:
    """Pick a method's return type out of its prose description.

    Looks at the first sentence mentioning a return value, e.g.
    "On success, the sent Message is returned." or
    "Returns an Array of Update objects.".
    """
    for sentence in _SENTENCE_SPLIT.split(description):
        if "return" not in sentence.lower():
            continue
        primitive = _return_from_sentence(sentence, description)
        if primitive is not None:
            return primitive

    logger.warning("No return type found, assuming True: %s", description[:80])
    return TrueLiteral()


def _return_from_sentence(sentence: str, description: str) -> Primitive | None:
    words = _WORD.findall(sentence)
    for index, word in enumerate(words):
        if word.lower() == "array" and words[index + 1 : index + 2] == ["of"]:
            if index + 2 < len(words):
                return Array(_word_to_primitive(words[index + 2], description))
        if not word[0].isupper() or word in _RETURN_STOPWORDS:
            continue
        return _word_to_primitive(word, description)
    return None


def _word_to_primitive(word: str, description: str) -> Primitive:
    if word == "Int":
        word = "Integer"
    elif word[0].isupper() and word.endswith("s"):
        # prose plurals: "an array of Messages"
        word = word[:-1]
    return _dispatch("", word, description)
