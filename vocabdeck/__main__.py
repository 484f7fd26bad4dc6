"""
Entry point for running as a module: python -m vocabdeck

Usage:
    python -m vocabdeck                     # Run web app on port 5001
    python -m vocabdeck --port 8080         # Run web app on another port
    python -m vocabdeck --lookup serendipity  # Look a word up and print the results
"""

import sys

from .utils.logging import setup_logging


def _arg_value(args, flag):
    """Value following a flag, or None."""
    for i, arg in enumerate(args):
        if arg == flag and i + 1 < len(args):
            return args[i + 1]
    return None


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv

    if '--help' in args or '-h' in args:
        print(__doc__)
        return 0

    setup_logging()

    if '--lookup' in args:
        from .fetchers.definition_lookup import DefinitionLookup

        word = (_arg_value(args, '--lookup') or '').strip()
        if not word:
            print("⚠ --lookup needs a word")
            return 2

        print(f"\n🔎 Looking up '{word}'\n")
        report = DefinitionLookup().lookup_detailed(word)

        for attempt in report.attempts:
            status = attempt.status.value
            detail = f" ({attempt.error})" if attempt.error else ""
            print(f"   {attempt.source:<16} {status}{detail}")

        if not report.candidates:
            print("\n✗ No definitions found - enter the meaning manually.")
            return 1

        print(f"\n📖 From {report.source}:")
        for i, candidate in enumerate(report.candidates, 1):
            print(f"  {i}. ({candidate.partOfSpeech}) {candidate.definition}")
            if candidate.example:
                print(f"     e.g. {candidate.example}")
        print()
        return 0

    port = 5001
    port_arg = _arg_value(args, '--port')
    if port_arg:
        try:
            port = int(port_arg)
        except ValueError:
            print(f"⚠ Invalid port: {port_arg}")
            return 2

    from .app import main as app_main
    app_main(port=port)
    return 0


if __name__ == '__main__':
    sys.exit(main())
