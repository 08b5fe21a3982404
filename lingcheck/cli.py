"""
lingcheck Command Line
======================
Usage: lingcheck [OPTIONS] FILE

Checks FILE (or stdin for "-") and writes the report to stdout.
Errors go to stderr. Exit codes: 0 success, 1 configuration or file
error, 2 invalid command line syntax.
"""

import argparse
import codecs
import os
import sys
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from config_logging import LingCheckError, ConfigurationError, FileError, get_logger, handle_errors, set_level
from . import __version__
from .config import CheckingConfiguration, get_settings
from .languages import list_languages

logger = get_logger('lingcheck.cli')

DEFAULT_ENCODING = 'utf-8'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='lingcheck',
        description='Rule-based grammar, style and spelling checker'
    )
    parser.add_argument('file', nargs='?', metavar='FILE',
                        help='File or directory to check, "-" for stdin')
    parser.add_argument('-r', '--recursive', action='store_true',
                        help='Check all files in directories recursively')
    parser.add_argument('-c', '--encoding', help='Character set of the input text')
    parser.add_argument('-b', dest='single_line_break', action='store_true',
                        help='Assume a single line break marks the end of a paragraph')
    parser.add_argument('-l', '--language', default='en-US',
                        help='Language code of the text (default: en-US)')
    parser.add_argument('--list', action='store_true',
                        help='Print all supported languages and exit')
    parser.add_argument('-m', '--mothertongue',
                        help="Language code of the writer's native language")
    parser.add_argument('-d', '--disable', default='',
                        help='Comma-separated rule ids to disable')
    parser.add_argument('-e', '--enable', default='',
                        help='Comma-separated rule ids; only these rules run')
    parser.add_argument('-t', '--taggeronly', action='store_true',
                        help="Don't check, only print the tagged sentences")
    parser.add_argument('-u', '--list-unknown', action='store_true',
                        help='Also print words the tagger does not know')
    parser.add_argument('-b2', '--bitext', action='store_true',
                        help='Check tab-separated source/target segments (source language = -m)')
    parser.add_argument('--api', action='store_true', help='Print results as XML')
    parser.add_argument('-p', '--profile', action='store_true',
                        help='Print run time of every rule')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log tagging and rule activity to stderr')
    parser.add_argument('--version', action='version', version=f'lingcheck {__version__}')
    parser.add_argument('-a', '--apply', action='store_true',
                        help='Print the text with the first suggestion of every match applied')
    parser.add_argument('--xmlfilter', action='store_true',
                        help='Remove XML/HTML tags from the input before checking')
    return parser


def _rule_ids(value: str) -> frozenset:
    return frozenset(part.strip() for part in value.split(',') if part.strip())


def configuration_from_args(args: argparse.Namespace) -> CheckingConfiguration:
    """Build and validate the checking configuration from parsed arguments."""
    if args.encoding:
        try:
            codecs.lookup(args.encoding)
        except LookupError:
            raise ConfigurationError(f"Unknown encoding: {args.encoding}", option='encoding')

    config = CheckingConfiguration(
        language=args.language,
        mother_tongue=args.mothertongue,
        enabled_rules=_rule_ids(args.enable),
        disabled_rules=_rule_ids(args.disable),
        tagger_only=args.taggeronly,
        bitext=args.bitext,
        apply_suggestions=args.apply,
        api_format=args.api,
        verbose=args.verbose,
        profile=args.profile,
        list_unknown=args.list_unknown,
        recursive=args.recursive,
        xml_filter=args.xmlfilter,
        single_line_break_marks_paragraph=args.single_line_break,
        encoding=args.encoding or DEFAULT_ENCODING,
        input_path=args.file,
    )
    return config.validate()


@handle_errors(logger)
def read_text(path: str, encoding: str) -> str:
    """Read a file (or stdin for "-") with the given encoding."""
    if path == '-':
        return sys.stdin.buffer.read().decode(encoding)
    with open(path, 'r', encoding=encoding) as f:
        return f.read()


def iter_input_files(path: str, recursive: bool) -> Iterator[str]:
    """
    The files to check for an input argument.

    Raises:
        FileError: for a missing path, or a directory without ``recursive``
    """
    if path == '-':
        yield path
        return
    target = Path(path)
    if not target.exists():
        raise FileError(f"File not found: {path}", filename=path)
    if target.is_dir():
        if not recursive:
            raise FileError(f"{path} is a directory, use -r to check it recursively",
                            filename=path)
        for directory, _, files in sorted(os.walk(target)):
            for name in sorted(files):
                yield os.path.join(directory, name)
        return
    yield path


def run(config: CheckingConfiguration) -> List[Tuple[str, str]]:
    """
    Check every input of a configuration.

    Returns:
        (path, rendered output) per checked file
    """
    from .pipeline import Pipeline

    pipeline = Pipeline(config)
    outputs = []
    for path in iter_input_files(config.input_path, config.recursive):
        text = read_text(path, config.encoding)
        logger.info("Working on file", file=path)
        outputs.append((path, pipeline.process(text)))
    return outputs


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        for language in list_languages():
            print(f"{language.code}\t{language.name}")
        return 0

    if args.file is None:
        parser.error("the following arguments are required: FILE")

    level = get_settings().logging.level
    if args.verbose:
        level = 'INFO'
    if level:
        set_level(level)

    try:
        config = configuration_from_args(args)
        outputs = run(config)
    except LingCheckError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    finally:
        from .languagetool import close_clients
        close_clients()

    show_headers = len(outputs) > 1 and not (config.api_format or config.apply_suggestions)
    for path, rendered in outputs:
        if show_headers:
            print(f"Working on {path}...")
        print(rendered)
    return 0


if __name__ == '__main__':
    sys.exit(main())
