"""
Command-line interface for the PDF Translator.
"""

import argparse
import logging
import sys
from typing import Optional

import requests
from dotenv import load_dotenv

from .config import DEFAULT_SOURCE_LANGUAGE, DEFAULT_TARGET_LANGUAGE, DEFAULT_OUTPUT_FILE
from .credentials import CredentialStore, setup, describe
from .exceptions import PDFTranslatorError, InstallError
from .file_output import FileOutputHandler
from .installer import Installer, get_installer
from .models import Credentials
from .pdf_processor import PDFProcessor
from .translation_service import TranslationService
from .utils import validate_language_code, list_languages

# Load environment variables
load_dotenv()


def setup_logging(verbose: bool = False) -> None:
    """Set up logging configuration."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')


def positive_int(value: str) -> int:
    """Validate a strictly positive integer argument."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not a whole number.")
    if number < 1:
        raise argparse.ArgumentTypeError("Value must be at least 1.")
    return number


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog='pdf-translator',
        description='Translate the text of a PDF file line by line using the Google Cloud Translation API',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pdf-translator --config --api-key KEY --project-id PROJECT --access-token TOKEN
  pdf-translator -p document.pdf
  pdf-translator -p document.pdf -s de -t en -o document_en.txt
  pdf-translator --list
  pdf-translator --install
        """
    )

    parser.add_argument('-p', '--path', dest='path', type=str,
                        help='The path to the pdf file you want to translate')

    parser.add_argument('-s', '--source', dest='source', type=validate_language_code,
                        default=DEFAULT_SOURCE_LANGUAGE,
                        help=f'The source language of the pdf file (default: {DEFAULT_SOURCE_LANGUAGE})')

    parser.add_argument('-t', '--target', dest='target', type=validate_language_code,
                        default=DEFAULT_TARGET_LANGUAGE,
                        help=f'The target language of the output text (default: {DEFAULT_TARGET_LANGUAGE})')

    parser.add_argument('-o', '--output', dest='output_file', type=str, default=DEFAULT_OUTPUT_FILE,
                        help=f'Output file for the translation (default: {DEFAULT_OUTPUT_FILE})')

    parser.add_argument('--paragraphs', dest='paragraphs', type=positive_int,
                        help='Translate paragraphs of N sentences instead of single lines')

    parser.add_argument('--list', dest='list', action='store_true',
                        help='Prints the list of supported languages')

    parser.add_argument('-i', '--install', dest='install', action='store_true',
                        help='Install poppler on your system, requires sudo or root access')

    # Configuration
    parser.add_argument('-c', '--config', dest='config', action='store_true',
                        help="Setup the configuration file, needs at least one of "
                             "'--api-key', '--access-token', '--project-id'")

    parser.add_argument('--api-key', dest='api_key', type=str, default='',
                        help='The API key for the Google Cloud Platform')

    parser.add_argument('--access-token', dest='access_token', type=str, default='',
                        help='The access token for the Google Cloud Platform')

    parser.add_argument('--project-id', dest='project_id', type=str, default='',
                        help='The project ID for the Google Cloud Platform')

    parser.add_argument('--show-config', dest='show_config', action='store_true',
                        help='Show where the configuration is stored and which credentials are set')

    parser.add_argument('-v', '--verbose', dest='verbose', action='store_true',
                        help='Enable debug logging')

    return parser


class PDFTranslator:
    """Main application class for PDF translation."""

    def __init__(self, store: Optional[CredentialStore] = None,
                 installer: Optional[Installer] = None,
                 pdf_processor: Optional[PDFProcessor] = None,
                 session: Optional[requests.Session] = None):
        self.store = store or CredentialStore()
        self.installer = installer or get_installer()
        self.pdf_processor = pdf_processor or PDFProcessor()
        self.session = session

    def install(self) -> None:
        """Run the Poppler installer standalone."""
        try:
            self.installer.run()
        except InstallError as e:
            print(f"Error installing poppler: {e}")
            sys.exit(1)

    def configure(self, api_key: str, project_id: str, access_token: str) -> None:
        """Save credentials supplied on the command line."""
        try:
            setup(Credentials(api_key, project_id, access_token), self.store)
        except OSError as e:
            print(f"Error saving configuration: {e}")
            sys.exit(1)

    def translate_file(self, file_path: str, source_language: str, target_language: str,
                       output_file: str = DEFAULT_OUTPUT_FILE,
                       paragraphs: Optional[int] = None) -> None:
        """Extract, translate and save the text of a PDF file."""
        if not PDFProcessor.is_pdf_file(file_path):
            print(f"Error: '{file_path}' is not a PDF file.")
            sys.exit(1)

        try:
            self.installer.run()
        except InstallError as e:
            logging.warning(f"Poppler check failed: {e}")

        try:
            document = self.pdf_processor.extract(file_path)
            if paragraphs:
                document = PDFProcessor.to_paragraphs(document, paragraphs)

            credentials = self.store.load()
            service = TranslationService(credentials, session=self.session)
            translated = service.translate_document(document, source_language, target_language)
            FileOutputHandler.save_translation(translated, output_file)
        except PDFTranslatorError as e:
            print(f"Error translating: {e}")
            sys.exit(1)
        except OSError as e:
            print(f"Error writing output: {e}")
            sys.exit(1)

        print("Translation complete")

    def run(self, args: argparse.Namespace) -> None:
        """Run the application with the given arguments."""
        if args.install:
            self.install()
            return

        if args.list:
            list_languages()
            return

        if args.config:
            self.configure(args.api_key, args.project_id, args.access_token)
            return

        if args.show_config:
            describe(self.store)
            return

        if not args.path:
            print("Error: Please provide a pdf file with --path, or one of --list, --install, --config")
            sys.exit(1)

        self.translate_file(args.path, args.source, args.target, args.output_file, args.paragraphs)


def main(argv: Optional[list] = None) -> None:
    """Main entry point for the CLI application."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    translator = PDFTranslator()
    translator.run(args)


if __name__ == '__main__':
    main()
