#!/usr/bin/env python3
"""
PDF Translator

This script extracts the text of a PDF file with pdftotext and translates it
line by line using the Google Cloud Translation API. The translated lines are
written to translated_text.txt as "<line number>: <text>".

Usage:
    python main.py [options]

Examples:
    python main.py --config --api-key KEY --project-id PROJECT --access-token TOKEN
    python main.py -p document.pdf                    # Translate from English to Swedish
    python main.py -p document.pdf -s de -t en        # Translate from German to English
    python main.py --list                             # Show supported language codes
    python main.py --install                          # Install poppler-utils

Credentials:
    Saved with --config to a per-user configuration file. Set PDF_TRANSLATOR_CONFIG
    (in the environment or a .env file) to use a different file.
"""

if __name__ == '__main__':
    from pdf_translator.cli import main
    main()
