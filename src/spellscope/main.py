#!/usr/bin/env python3
"""spellscope: show the spell checking settings that apply to a file"""

import argparse
import logging
import os
import sys

from . import user_dictionary
from .adapters.diagnostics import LoggingDiagnosticSink
from .adapters.tier_provider import FileTierProvider
from .config import config
from .core.buffer_cache import BufferConfigurationCache
from .core.cascade import ConfigurationCascade
from .core.config_model import EffectiveConfiguration
from .core.culture import available_dictionary_languages, is_valid_culture, normalize_culture
from .core.document import DocumentIdentity


def format_configuration(effective: EffectiveConfiguration) -> list[str]:
    lines = [
        f"Default language:        {effective.default_language}",
        f"Spell check as you type: {effective.spell_check_as_you_type}",
        f"Ignore words w/ digits:  {effective.ignore_words_with_digits}",
        f"Ignore all uppercase:    {effective.ignore_words_in_all_uppercase}",
        f"Ignore format specs:     {effective.ignore_format_specifiers}",
        f"Ignore filenames/e-mail: {effective.ignore_filenames_and_email_addresses}",
        f"Ignore XML in text:      {effective.ignore_xml_elements_in_text}",
        f"Underscore separates:    {effective.treat_underscore_as_separator}",
        f"Ignore character class:  {effective.ignore_character_class.value}",
        f"Excluded extensions:     {effective.exclude_by_filename_extension or '(none)'}",
        f"Ignored words:           {len(effective.ignored_words)}",
        f"Ignored XML elements:    {', '.join(sorted(effective.ignored_xml_elements))}",
        f"Spell checked attrs:     {', '.join(sorted(effective.spell_checked_xml_attributes))}",
    ]
    return lines


def _show(args) -> int:
    provider = FileTierProvider(solution_file=args.solution)
    document = DocumentIdentity.from_path(args.path)
    if args.project:
        provider.add_project(args.project_dir or os.path.dirname(document.path), args.project)

    cache = BufferConfigurationCache(ConfigurationCascade(LoggingDiagnosticSink()), provider)
    for tier in provider.tiers_for(document):
        print(f"Tier: {tier.label}")

    effective = cache.get_configuration(document)
    if effective is None:
        print(f"Spell checking is disabled for {document.path}")
        return 1

    print("\n".join(format_configuration(effective)))
    return 0


def _languages(args) -> int:
    for culture in available_dictionary_languages(args.folder or config.CONFIG_DIR):
        print(culture)
    return 0


def _dictionary(args) -> int:
    if not is_valid_culture(args.culture):
        print(f"Not a culture name: {args.culture}", file=sys.stderr)
        return 2

    culture, folder = normalize_culture(args.culture), args.folder
    for word in args.add:
        if not user_dictionary.add_word(culture, word, folder):
            print(f"Already present: {word}")
    for word in args.remove:
        if not user_dictionary.remove_word(culture, word, folder):
            print(f"Not found: {word}")
    if args.import_file:
        added = user_dictionary.import_file(culture, args.import_file, folder)
        print(f"Imported {len(added)} word(s)")
    if args.export_file:
        user_dictionary.export_words(culture, args.export_file, folder)

    if not (args.add or args.remove or args.import_file or args.export_file):
        for word in user_dictionary.load_user_words(culture, folder):
            print(word)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="spellscope", description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="Show the effective configuration for a file")
    show.add_argument("path")
    show.add_argument("--solution", help="Solution configuration file")
    show.add_argument("--project", help="Project configuration file")
    show.add_argument("--project-dir", help="Folder governed by the project file")
    show.set_defaults(func=_show)

    languages = sub.add_parser("languages", help="List available dictionary languages")
    languages.add_argument("--folder", help="Dictionary folder")
    languages.set_defaults(func=_languages)

    dictionary = sub.add_parser("dictionary", help="List or edit a user dictionary")
    dictionary.add_argument("culture", help="Culture name, e.g. en-US")
    dictionary.add_argument("--add", action="append", default=[], metavar="WORD")
    dictionary.add_argument("--remove", action="append", default=[], metavar="WORD")
    dictionary.add_argument("--import", dest="import_file", metavar="FILE")
    dictionary.add_argument("--export", dest="export_file", metavar="FILE")
    dictionary.add_argument("--folder", help="User dictionary folder")
    dictionary.set_defaults(func=_dictionary)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if config.DEBUG else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
