"""Command-line entry point for Subject Spotter.

Processes a historical text document: identifies known subjects with a Large
Language Model, then writes the annotated markup, a CSV table or a JSON listing
of the subjects found.
"""

import argparse
import logging
import sys

from subject_spotter.config import Settings
from subject_spotter.extraction import OutputFormat
from subject_spotter.io import OutputWriter
from subject_spotter.llm import SUPPORTED_SERVICES
from subject_spotter.pipeline import ApplicationError, Engine
from subject_spotter.prompt import SUPPORTED_TEMPLATES


# ============================================================================
# Utility functions
# ============================================================================
def setup_logging(level: str = 'INFO') -> None:
    """Set up application logging on stderr.

    stdout is reserved for streamed model output and rendered results.

    Args:
        level: Logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR')
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    log_format = '%(asctime)s %(name)s [%(levelname)s]: %(message)s'
    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        datefmt='%Y-%m-%d %H:%M:%S',
        force=True,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ]
    )

    logging.info('Logging configured (level=%s)', level)

    for logger_name in ['openai', 'anthropic', 'httpx', 'urllib3']:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def validate_arguments(args: argparse.Namespace) -> None:
    """Validate command line arguments.

    Args:
        args: Parsed command line arguments.

    Raises:
        ApplicationError: If arguments are invalid.
    """
    if not args.text_path.strip():
        raise ApplicationError('Text path must not be empty')
    if not args.subject_listing_path.strip():
        raise ApplicationError('Subject listing path must not be empty')
    if args.context_width is not None and args.context_width <= 0:
        raise ApplicationError(
            f'Context width must be a positive integer, got {args.context_width}'
        )

    logging.info('Command line arguments validated successfully')


def _get_example_text() -> str:
    """Get example text for argument parser epilog."""
    return """
Examples:
    # Process with default settings (streaming enabled, markup output)
    subject-spotter process --text-path path/to/text.txt \\
        --subject-listing-path path/to/subjects.json

    # Non-streaming, JSON output written to output/result.json
    subject-spotter process --text-path path/to/text.txt \\
        --subject-listing-path path/to/subjects.json \\
        --output-format structured --no-stream --output-path output/result
"""


def _add_process_arguments(parser: argparse.ArgumentParser) -> None:
    """Add arguments of the process command.

    Args:
        parser: ArgumentParser instance.
    """
    parser.add_argument(
        '--text-path',
        type=str,
        required=True,
        help='Input text path (URL or local path)'
    )

    parser.add_argument(
        '--subject-listing-path',
        type=str,
        required=True,
        help='Path to subject listing (URL or local path)'
    )

    parser.add_argument(
        '--user-context',
        type=str,
        default=None,
        help='Additional prompt context for better recognition'
    )

    parser.add_argument(
        '--prompt-template',
        type=str,
        choices=sorted(SUPPORTED_TEMPLATES),
        default=Settings.PROMPT_TEMPLATE,
        help='Prompt template'
    )

    parser.add_argument(
        '--llm-service',
        type=str,
        choices=list(SUPPORTED_SERVICES),
        default='openai',
        help='LLM service to use'
    )

    format_choices = [fmt.value for fmt in OutputFormat] + [fmt.extension for fmt in OutputFormat]
    parser.add_argument(
        '--output-format',
        type=str,
        choices=format_choices,
        default=Settings.OUTPUT_FORMAT,
        help='Output format'
    )

    parser.add_argument(
        '--output-path',
        type=str,
        default=None,
        help='Output path without extension; the format extension is appended'
    )

    parser.add_argument(
        '--stream',
        action=argparse.BooleanOptionalAction,
        default=True,
        help='Echo the model output while it streams in'
    )

    parser.add_argument(
        '--context-width',
        type=int,
        default=None,
        help=f'Characters of context around each subject (default: {Settings.N_CHARACTERS})'
    )


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='subject-spotter',
        description='Subject Spotter - identify subjects in historical text documents using Large Language Models',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_get_example_text()
    )

    parser.add_argument(
        '--log-level', '-l',
        type=str,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        default='WARNING',
        help='Set logging level (default: WARNING)'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)
    process_parser = subparsers.add_parser(
        'process',
        help='Processes a historical text document to identify subjects',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    _add_process_arguments(process_parser)

    return parser


def run_process(args: argparse.Namespace) -> int:
    """Run the process command.

    Args:
        args: Parsed command line arguments.

    Returns:
        Exit code (0 for success).
    """
    engine = Engine(
        text_path=args.text_path,
        subject_listing_path=args.subject_listing_path,
        user_context=args.user_context,
        prompt_template=args.prompt_template,
        llm_service=args.llm_service,
        output_format=args.output_format,
        stream=args.stream,
        context_width=args.context_width,
    )
    engine.process()
    if args.stream:
        sys.stdout.write('\n')

    output = engine.serialize()
    if args.output_path:
        output_path = OutputWriter().write_output(args.output_path, engine.output_format, output)
        logging.info('Wrote %s output to %s', engine.output_format.value, output_path)
    elif not args.stream:
        sys.stdout.write(output)
        if not output.endswith('\n'):
            sys.stdout.write('\n')
    return 0


# ------------------------------------------------------------------------------
# Main function
# ------------------------------------------------------------------------------
def main(argv: list[str] | None = None) -> int:
    """Main application entry point.

    Args:
        argv: Command line arguments, defaults to sys.argv[1:].

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    try:
        validate_arguments(args)
        return run_process(args)
    except KeyboardInterrupt:
        logging.error('Processing interrupted by user')
        return 1
    except Exception as e:
        logging.error('Processing failed: %s', e, exc_info=logging.getLogger().isEnabledFor(logging.DEBUG))
        print(f'Error: {e}', file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
