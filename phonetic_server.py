"""
Tulu Phonetic Key Server
Flask API and command line front end for the tlphone encoder
"""

import argparse
import logging
import os
import sys
from typing import Dict, List, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, request

from kannada_transliterator import TARGET_SCRIPT, UnsupportedScriptError, to_kannada
from tlphone import TLPhone

# Load .env file for local development
load_dotenv()

PORT = int(os.getenv('PORT', '5000'))
HOST = os.getenv('TLPHONE_HOST', '0.0.0.0')
DEBUG = os.getenv('TLPHONE_DEBUG', 'false').lower() in ('1', 'true', 'yes')
MAX_BATCH = int(os.getenv('TLPHONE_MAX_BATCH', '500'))
LOG_LEVEL = os.getenv('TLPHONE_LOG_LEVEL', 'INFO')

logger = logging.getLogger(__name__)

app = Flask(__name__)

# Initialize encoder
encoder = TLPhone()


def encode_word(word: str, script: str = TARGET_SCRIPT) -> Dict:
    """
    Encode one word, converting it to Kannada first if needed

    Args:
        word: The word to encode
        script: Script the word is written in

    Returns:
        Dict with the original word, its Kannada form and the three keys
    """
    kannada = to_kannada(word.strip(), script)
    key0, key1, key2 = encoder.encode(kannada)
    return {
        'word': word,
        'script': script or TARGET_SCRIPT,
        'kannada': kannada,
        'key0': key0,
        'key1': key1,
        'key2': key2,
    }


def _cors(response):
    response.headers.add('Access-Control-Allow-Origin', '*')
    return response


def _preflight():
    response = jsonify({'status': 'ok'})
    response.headers.add('Access-Control-Allow-Headers', 'Content-Type')
    response.headers.add('Access-Control-Allow-Methods', 'POST')
    return _cors(response)


def _error(message: str, status: int):
    return _cors(jsonify({'success': False, 'error': message})), status


def _request_data(raw_field: Optional[str] = None) -> Dict:
    """Read the request payload from JSON, form data or the raw body"""
    data = request.get_json(force=True, silent=True)
    if isinstance(data, dict):
        return data

    data = request.form.to_dict()

    if not data and raw_field:
        body = request.get_data(as_text=True)
        data = {raw_field: body} if body else {}

    return data


@app.route('/api/health', methods=['GET'])
def api_health():
    return _cors(jsonify({'status': 'ok'}))


@app.route('/api/encode', methods=['POST', 'OPTIONS'])
def api_encode():
    """Encode a single word"""
    if request.method == 'OPTIONS':
        return _preflight()

    data = _request_data(raw_field='word')
    word = data.get('word', '')

    if not isinstance(word, str) or not word.strip():
        return _error('Please provide a word', 400)

    try:
        result = encode_word(word, data.get('script') or TARGET_SCRIPT)
    except UnsupportedScriptError as e:
        return _error(str(e), 400)
    except Exception as e:
        logger.exception("Encoding failed for %r", word)
        return _error(f'Encoder error: {str(e)}', 500)

    result['success'] = True
    return _cors(jsonify(result))


@app.route('/api/encode/batch', methods=['POST', 'OPTIONS'])
def api_encode_batch():
    """Encode a list of words"""
    if request.method == 'OPTIONS':
        return _preflight()

    data = request.get_json(force=True, silent=True) or {}
    if not isinstance(data, dict):
        data = {}

    words = data.get('words')
    if words is None:
        words = request.form.getlist('words')

    if not words or not isinstance(words, list):
        return _error('Please provide a list of words', 400)

    if len(words) > MAX_BATCH:
        return _error(f'Too many words: {len(words)} (limit is {MAX_BATCH})', 400)

    if not all(isinstance(w, str) for w in words):
        return _error('Every word must be a string', 400)

    script = data.get('script') or request.form.get('script') or TARGET_SCRIPT

    try:
        results: List[Dict] = [encode_word(w, script) for w in words]
    except UnsupportedScriptError as e:
        return _error(str(e), 400)
    except Exception as e:
        logger.exception("Batch encoding failed")
        return _error(f'Encoder error: {str(e)}', 500)

    return _cors(jsonify({
        'success': True,
        'results': results,
        'total': len(results),
    }))


def main(argv: Optional[List[str]] = None) -> int:
    arg_parser = argparse.ArgumentParser(description='Tulu phonetic keys (tlphone)')
    arg_parser.add_argument('words', nargs='*', help='Words to encode; starts the API server if omitted')
    arg_parser.add_argument('--script', default=TARGET_SCRIPT, help='Script of the input words')
    args = arg_parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.words:
        # CLI mode
        for word in args.words:
            try:
                result = encode_word(word, args.script)
            except UnsupportedScriptError as e:
                print(f"Error: {e}")
                return 1

            print(f"\n=== Keys for: {result['word']} ===")
            if result['kannada'] != word:
                print(f"Kannada: {result['kannada']}")
            print(f"key0: {result['key0']}")
            print(f"key1: {result['key1']}")
            print(f"key2: {result['key2']}")
        return 0

    # Server mode
    logger.info("Starting tlphone server on %s:%d", HOST, PORT)
    app.run(host=HOST, port=PORT, debug=DEBUG)
    return 0


if __name__ == '__main__':
    sys.exit(main())
