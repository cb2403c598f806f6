import logging
import os
from flask import Flask, jsonify, render_template, request, session
from flask_cors import CORS
from catalog import ALL_CATEGORY, all_resources, get_resource, is_category
from controller import SEARCH_INPUT_ID, DirectoryController, SelectionState
from renderers import cards, chips
from renderers.surface import InputSurface, MemorySurface, SoupSurface
from search import filter_resources

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", 5000))
# Without a configured key every restart issues a new one, which resets all selections.
SECRET_KEY = os.environ.get("SECRET_KEY") or os.urandom(24).hex()

app = Flask(__name__)
app.logger.setLevel(logging.INFO)
app.secret_key = SECRET_KEY
CORS(app)

STATE_KEY = "selection"


def _load_state():
    stored = session.get(STATE_KEY) or {}
    category = stored.get("active_category", ALL_CATEGORY)
    if not is_category(category):
        app.logger.warning("Discarding stored selection with unknown category %r", category)
        return SelectionState()
    return SelectionState(category, stored.get("search_query", ""))


def _save_state(state):
    session[STATE_KEY] = {
        "active_category": state.active_category,
        "search_query": state.search_query,
    }


def _open_directory(state):
    """Build a controller over *state* and run its initial render."""

    surface = MemorySurface([chips.REGION_ID, cards.REGION_ID])
    inputs = InputSurface({SEARCH_INPUT_ID: state.search_query})
    directory = DirectoryController(surface, inputs, state=state)
    directory.init()
    return directory


def _regions(directory):
    return {
        "categories": directory.surface.get_markup(chips.REGION_ID),
        "resources": directory.surface.get_markup(cards.REGION_ID),
        "activeCategory": directory.state.active_category,
        "searchQuery": directory.state.search_query,
    }


@app.route('/')
def home():
    # Every page load is a new document and starts from the default selection.
    state = SelectionState()
    _save_state(state)
    directory = _open_directory(state)

    page = SoupSurface(render_template('index.html'))
    page.replace_content(chips.REGION_ID, directory.surface.get_markup(chips.REGION_ID))
    page.replace_content(cards.REGION_ID, directory.surface.get_markup(cards.REGION_ID))
    return str(page)


@app.route('/api/health')
def health():
    return jsonify({"ok": True})


@app.route('/api/regions')
def regions():
    return jsonify(_regions(_open_directory(_load_state())))


@app.route('/api/events', methods=['POST'])
def events():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        app.logger.warning("Rejected event without a JSON object body")
        return jsonify({"error": "expected a JSON object"}), 400

    kind = payload.get("type")
    target = payload.get("target", "")

    for field in ("value", "category", "key"):
        if field in payload and not isinstance(payload[field], str):
            app.logger.warning("Rejected event with non-string %s: %r", field, payload[field])
            return jsonify({"error": f"{field} must be a string"}), 400

    directory = _open_directory(_load_state())
    inputs = directory.inputs
    if "value" in payload:
        inputs.set_value(SEARCH_INPUT_ID, payload["value"])

    try:
        if kind == "click":
            data = {}
            if "category" in payload:
                data["category"] = payload["category"]
            inputs.click(target, **data)
        elif kind == "keypress":
            inputs.press_key(target, payload.get("key", ""))
        else:
            app.logger.warning("Rejected event of unknown type %r", kind)
            return jsonify({"error": f"unknown event type {kind!r}"}), 400
    except ValueError as exc:
        app.logger.warning("Rejected event %r: %s", payload, exc)
        return jsonify({"error": str(exc)}), 400

    _save_state(directory.state)
    return jsonify(_regions(directory))


@app.route('/api/resources')
def list_resources():
    category = request.args.get("category", ALL_CATEGORY)
    query = request.args.get("q", "")

    if not is_category(category):
        app.logger.warning("Rejected listing for unknown category %r", category)
        return jsonify({"error": f"unknown category {category!r}"}), 400

    items = filter_resources(all_resources(), category, query)
    app.logger.info("Listing %s/%r returned %d items", category, query, len(items))
    return jsonify({"items": items, "count": len(items)})


@app.route('/api/resources/<int:resource_id>')
def resource_detail(resource_id):
    item = get_resource(resource_id)
    if item is None:
        return jsonify({"error": "not_found"}), 404
    return jsonify(item)


if __name__ == '__main__':
    app.run(host=HOST, port=PORT)
