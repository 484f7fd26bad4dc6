"""
VocabDeck - Flask Web Application

Main entry point for the web application.

API Sources:
- Wiktionary REST API: Definitions, Examples
- Free Dictionary: Fallback
- WordsAPI: Last fallback (needs WORDSAPI_KEY)
"""

import json
import queue

from flask import Flask, Response, request, jsonify

from .config import VERSION, VOCAB_FILE, SUBJECTS, ALL_SUBJECTS, STREAM_KEEPALIVE
from .fetchers.base import FetchStatus
from .fetchers.definition_lookup import DefinitionLookup
from .store.vocabulary_store import VocabEntry, VocabularyStore, VocabValidationError
from .store.feed import VocabularyFeed
from .utils.logging import setup_logging

# Initialize Flask app
app = Flask(__name__)

# Global instances (lazy loaded)
_vocabulary_store = None
_definition_lookup = None


def get_vocabulary_store():
    """Get or create vocabulary store instance."""
    global _vocabulary_store
    if _vocabulary_store is None:
        _vocabulary_store = VocabularyStore(str(VOCAB_FILE))
    return _vocabulary_store


def get_definition_lookup():
    """Get or create definition lookup instance."""
    global _definition_lookup
    if _definition_lookup is None:
        _definition_lookup = DefinitionLookup()
    return _definition_lookup


def _snapshot_payload(entries, subject):
    return {
        'subject': subject,
        'count': len(entries),
        'entries': [e.to_dict() for e in entries],
    }


# =============================================================================
# ROUTES - VOCABULARY
# =============================================================================

@app.route('/')
def index():
    """App summary."""
    return jsonify({
        'name': 'VocabDeck',
        'version': VERSION,
        'subjects': [ALL_SUBJECTS] + SUBJECTS,
        'count': get_vocabulary_store().count(),
    })


@app.route('/api/subjects')
def api_subjects():
    """List subject tags."""
    return jsonify({
        'subjects': [ALL_SUBJECTS] + SUBJECTS,
        'default': ALL_SUBJECTS,
    })


@app.route('/api/vocab')
def api_vocab_list():
    """List entries, newest first, optionally for one subject."""
    subject = request.args.get('subject', ALL_SUBJECTS)
    entries = get_vocabulary_store().list_entries(subject)

    payload = _snapshot_payload(entries, subject)
    payload['success'] = True
    return jsonify(payload)


@app.route('/api/vocab', methods=['POST'])
def api_vocab_add():
    """Add an entry from the submitted form."""
    data = request.get_json(silent=True)

    try:
        entry = VocabEntry.from_form(data)
    except VocabValidationError as e:
        return jsonify({'success': False, 'error': str(e)}), 400

    if not get_vocabulary_store().add_entry(entry):
        return jsonify({'success': False, 'error': 'Failed to save'}), 500

    return jsonify({
        'success': True,
        'message': f"Entry '{entry.word}' added.",
        'entry': entry.to_dict(),
    }), 201


@app.route('/api/vocab/stream')
def api_vocab_stream():
    """Server-sent events: one event per snapshot of the selected subject."""
    subject = request.args.get('subject', ALL_SUBJECTS)
    store = get_vocabulary_store()

    def generate():
        updates = queue.Queue()
        feed = VocabularyFeed(store, on_change=updates.put)
        feed.show(subject)

        try:
            while True:
                try:
                    snapshot = updates.get(timeout=STREAM_KEEPALIVE)
                except queue.Empty:
                    yield ": keepalive\n\n"
                    continue

                yield f"data: {json.dumps(_snapshot_payload(snapshot, feed.subject))}\n\n"
        finally:
            feed.close()

    return Response(
        generate(),
        mimetype='text/event-stream',
        headers={'Cache-Control': 'no-cache'},
    )


# =============================================================================
# ROUTES - DEFINITION LOOKUP
# =============================================================================

@app.route('/api/lookup')
def api_lookup():
    """Look a word up across all dictionary sources."""
    word = request.args.get('word', '').strip()
    if not word:
        return jsonify({'success': False, 'error': 'No word specified'}), 400

    report = get_definition_lookup().lookup_detailed(word)

    payload = report.to_dict()
    payload['success'] = True
    return jsonify(payload)


@app.route('/api/fetch-meaning', methods=['POST'])
def api_fetch_meaning():
    """Suggest a meaning for the word typed into the entry form."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    word = str(data.get('word') or '').strip()

    if not word:
        return jsonify({
            'success': False,
            'message': 'ERROR: NULL_STRING_INPUT',
        }), 400

    report = get_definition_lookup().lookup_detailed(word)
    candidates = report.candidates

    if not candidates:
        # Every source came back empty or failed
        all_failed = bool(report.attempts) and all(
            a.status == FetchStatus.FAILED for a in report.attempts
        )
        return jsonify({
            'success': False,
            'word': word,
            'message': 'SYSTEM_ERROR: NETWORK_FAILURE' if all_failed else 'QUERY_FAILURE: WORD_NOT_FOUND',
            'candidates': [],
        })

    return jsonify({
        'success': True,
        'word': word,
        'message': 'QUERY_SUCCESS: DATA_RETRIEVED',
        'meaning': candidates[0].definition,
        'example': candidates[0].example,
        'candidates': [c.to_dict() for c in candidates],
    })


# =============================================================================
# ROUTES - API STATUS
# =============================================================================

@app.route('/api/status')
def api_status():
    """Show which dictionary sources are usable."""
    lookup = get_definition_lookup()

    return jsonify({
        'sources': [
            {
                'name': fetcher.name,
                'configured': fetcher.is_configured(),
                'timeout': fetcher.timeout,
            }
            for fetcher in lookup.fetchers
        ],
        'listeners': get_vocabulary_store().subscription_count,
    })


# =============================================================================
# MAIN
# =============================================================================

def main(host: str = '0.0.0.0', port: int = 5001):
    """Run the application."""
    setup_logging()

    print(f"""
╔══════════════════════════════════════════════════════════╗
║         VocabDeck v{VERSION:<38}║
║   Vocabulary flashcards with dictionary lookup           ║
╠══════════════════════════════════════════════════════════╣
║  API Sources:                                            ║
║  • Wiktionary: Definitions, Examples                     ║
║  • Free Dictionary: Fallback                             ║
║  • WordsAPI: Last fallback (WORDSAPI_KEY)                ║
╠══════════════════════════════════════════════════════════╣
║  Vocabulary file: {str(VOCAB_FILE):<39}║
╚══════════════════════════════════════════════════════════╝
    """)

    print(f"🌐 Starting server at http://localhost:{port}")
    print("   Press Ctrl+C to stop\n")

    app.run(host=host, port=port, debug=False, threaded=True)


if __name__ == '__main__':
    main()
