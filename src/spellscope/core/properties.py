"""Property names, list item tags and compiled-in defaults.

Every property a tier may define is listed here together with the value
used when no tier defines it.
"""

from __future__ import annotations

from enum import Enum


class IgnoredCharacterClass(Enum):
    """Words containing characters of the given class are skipped."""

    NONE = "None"
    NON_ASCII = "NonAscii"
    NON_LATIN = "NonLatin"


class PropertyNames:
    DEFAULT_LANGUAGE = "DefaultLanguage"
    SPELL_CHECK_AS_YOU_TYPE = "SpellCheckAsYouType"
    IGNORE_WORDS_WITH_DIGITS = "IgnoreWordsWithDigits"
    IGNORE_WORDS_IN_ALL_UPPERCASE = "IgnoreWordsInAllUppercase"
    IGNORE_FORMAT_SPECIFIERS = "IgnoreFormatSpecifiers"
    IGNORE_FILENAMES_AND_EMAIL_ADDRESSES = "IgnoreFilenamesAndEMailAddresses"
    IGNORE_XML_ELEMENTS_IN_TEXT = "IgnoreXmlElementsInText"
    TREAT_UNDERSCORE_AS_SEPARATOR = "TreatUnderscoreAsSeparator"
    IGNORE_CHARACTER_CLASS = "IgnoreCharacterClass"
    EXCLUDE_BY_FILENAME_EXTENSION = "ExcludeByFilenameExtension"

    CSHARP_IGNORE_XML_DOC_COMMENTS = "CSharpOptions.IgnoreXmlDocComments"
    CSHARP_IGNORE_DELIMITED_COMMENTS = "CSharpOptions.IgnoreDelimitedComments"
    CSHARP_IGNORE_STANDARD_SINGLE_LINE_COMMENTS = "CSharpOptions.IgnoreStandardSingleLineComments"
    CSHARP_IGNORE_QUADRUPLE_SLASH_COMMENTS = "CSharpOptions.IgnoreQuadrupleSlashComments"
    CSHARP_IGNORE_NORMAL_STRINGS = "CSharpOptions.IgnoreNormalStrings"
    CSHARP_IGNORE_VERBATIM_STRINGS = "CSharpOptions.IgnoreVerbatimStrings"

    IGNORED_WORDS = "IgnoredWords"
    IGNORED_WORDS_ITEM = "Ignore"
    IGNORED_XML_ELEMENTS = "IgnoredXmlElements"
    IGNORED_XML_ELEMENTS_ITEM = "Ignore"
    SPELL_CHECKED_XML_ATTRIBUTES = "SpellCheckedXmlAttributes"
    SPELL_CHECKED_XML_ATTRIBUTES_ITEM = "SpellCheck"


# The seven general behaviour flags, in display order
BEHAVIOR_FLAGS: tuple[str, ...] = (
    PropertyNames.SPELL_CHECK_AS_YOU_TYPE,
    PropertyNames.IGNORE_WORDS_WITH_DIGITS,
    PropertyNames.IGNORE_WORDS_IN_ALL_UPPERCASE,
    PropertyNames.IGNORE_FORMAT_SPECIFIERS,
    PropertyNames.IGNORE_FILENAMES_AND_EMAIL_ADDRESSES,
    PropertyNames.IGNORE_XML_ELEMENTS_IN_TEXT,
    PropertyNames.TREAT_UNDERSCORE_AS_SEPARATOR,
)

CSHARP_FLAGS: tuple[str, ...] = (
    PropertyNames.CSHARP_IGNORE_XML_DOC_COMMENTS,
    PropertyNames.CSHARP_IGNORE_DELIMITED_COMMENTS,
    PropertyNames.CSHARP_IGNORE_STANDARD_SINGLE_LINE_COMMENTS,
    PropertyNames.CSHARP_IGNORE_QUADRUPLE_SLASH_COMMENTS,
    PropertyNames.CSHARP_IGNORE_NORMAL_STRINGS,
    PropertyNames.CSHARP_IGNORE_VERBATIM_STRINGS,
)

DEFAULT_IGNORED_WORDS: tuple[str, ...] = (
    "\\addindex", "\\addtogroup", "\\anchor", "\\arg", "\\attention", "\\author", "\\authors",
    "\\brief", "\\bug", "\\file", "\\fn", "\\name", "\\namespace", "\\nosubgrouping", "\\note",
    "\\ref", "\\refitem", "\\related", "\\relates", "\\relatedalso", "\\relatesalso", "\\remark",
    "\\remarks", "\\result", "\\return", "\\returns", "\\retval", "\\rtfonly", "\\tableofcontents",
    "\\test", "\\throw", "\\throws", "\\todo", "\\tparam", "\\typedef", "\\var", "\\verbatim",
    "\\verbinclude", "\\version", "\\vhdlflow",
)

DEFAULT_IGNORED_XML_ELEMENTS: tuple[str, ...] = (
    "c", "code", "codeEntityReference", "codeReference", "codeInline", "command",
    "environmentVariable", "fictitiousUri", "foreignPhrase", "link", "linkTarget", "linkUri",
    "localUri", "replaceable", "see", "seeAlso", "unmanagedCodeEntityReference", "token",
)

DEFAULT_SPELL_CHECKED_ATTRIBUTES: tuple[str, ...] = (
    "altText", "Caption", "Content", "Header", "lead", "title", "term", "Text", "ToolTip",
)

DEFAULT_LANGUAGE = "en-US"

DEFAULTS: dict[str, object] = {
    PropertyNames.DEFAULT_LANGUAGE: DEFAULT_LANGUAGE,
    PropertyNames.SPELL_CHECK_AS_YOU_TYPE: True,
    PropertyNames.IGNORE_WORDS_WITH_DIGITS: True,
    PropertyNames.IGNORE_WORDS_IN_ALL_UPPERCASE: True,
    PropertyNames.IGNORE_FORMAT_SPECIFIERS: True,
    PropertyNames.IGNORE_FILENAMES_AND_EMAIL_ADDRESSES: True,
    PropertyNames.IGNORE_XML_ELEMENTS_IN_TEXT: True,
    PropertyNames.TREAT_UNDERSCORE_AS_SEPARATOR: False,
    PropertyNames.IGNORE_CHARACTER_CLASS: IgnoredCharacterClass.NONE,
    PropertyNames.EXCLUDE_BY_FILENAME_EXTENSION: "",
    PropertyNames.CSHARP_IGNORE_XML_DOC_COMMENTS: False,
    PropertyNames.CSHARP_IGNORE_DELIMITED_COMMENTS: False,
    PropertyNames.CSHARP_IGNORE_STANDARD_SINGLE_LINE_COMMENTS: False,
    PropertyNames.CSHARP_IGNORE_QUADRUPLE_SLASH_COMMENTS: False,
    PropertyNames.CSHARP_IGNORE_NORMAL_STRINGS: False,
    PropertyNames.CSHARP_IGNORE_VERBATIM_STRINGS: False,
    PropertyNames.IGNORED_WORDS: DEFAULT_IGNORED_WORDS,
    PropertyNames.IGNORED_XML_ELEMENTS: DEFAULT_IGNORED_XML_ELEMENTS,
    PropertyNames.SPELL_CHECKED_XML_ATTRIBUTES: DEFAULT_SPELL_CHECKED_ATTRIBUTES,
}

# (property, item tag, case-insensitive)
SET_PROPERTIES: tuple[tuple[str, str, bool], ...] = (
    (PropertyNames.IGNORED_WORDS, PropertyNames.IGNORED_WORDS_ITEM, True),
    (PropertyNames.IGNORED_XML_ELEMENTS, PropertyNames.IGNORED_XML_ELEMENTS_ITEM, False),
    (PropertyNames.SPELL_CHECKED_XML_ATTRIBUTES, PropertyNames.SPELL_CHECKED_XML_ATTRIBUTES_ITEM, False),
)

