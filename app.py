from flask import Flask, request, jsonify
import os
import re

from maze_route import ALGORITHMS, GridFormatError, parse_grid, solve
from maze_route.render import render_path

app = Flask(__name__)

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DATA_DIR = os.environ.get('MAZE_ROUTE_DATA_DIR') or os.path.join(BASE_DIR, 'data')
MAZES_DIR = os.path.join(DATA_DIR, 'mazes')
DEFAULT_MODE = os.environ.get('MAZE_ROUTE_MODE') or 'search'


def ensure_data_dir() -> None:
    os.makedirs(DATA_DIR, exist_ok=True)
    os.makedirs(MAZES_DIR, exist_ok=True)


def _is_safe_maze_name(name: str) -> bool:
    # Allow only simple names like "foo.txt", alnum, dash, underscore, dot
    if not isinstance(name, str) or len(name) == 0 or len(name) > 128:
        return False
    return re.fullmatch(r"[A-Za-z0-9_.-]+", name) is not None and name.lower().endswith('.txt')


def list_mazes() -> list[str]:
    ensure_data_dir()
    names = [fn for fn in os.listdir(MAZES_DIR) if _is_safe_maze_name(fn)]
    return sorted(names)


def load_maze_text(name: str) -> str:
    if not _is_safe_maze_name(name):
        raise ValueError('invalid_maze_name')
    path = os.path.join(MAZES_DIR, name)
    if not os.path.exists(path):
        raise FileNotFoundError('maze_not_found')
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def save_maze_text(name: str, text: str) -> None:
    if not _is_safe_maze_name(name):
        raise ValueError('invalid_maze_name')
    # Refuse to store anything the solver would reject
    parse_grid(text)
    ensure_data_dir()
    with open(os.path.join(MAZES_DIR, name), 'w', encoding='utf-8') as f:
        f.write(text)


def _format_error(e: GridFormatError):
    body = {'status': 'error', 'message': str(e)}
    if e.x is not None:
        body['x'] = e.x
        body['y'] = e.y
    return jsonify(body), 400


@app.get('/api/mazes')
def api_list_mazes():
    try:
        names = list_mazes()
        return jsonify({'mazes': names, 'default': names[0] if names else None})
    except OSError as e:
        return jsonify({'status': 'error', 'message': str(e)}), 400


@app.get('/api/mazes/<name>')
def api_get_maze(name):
    try:
        return jsonify({'name': name, 'text': load_maze_text(name)})
    except FileNotFoundError as e:
        return jsonify({'status': 'error', 'message': str(e)}), 404
    except ValueError as e:
        return jsonify({'status': 'error', 'message': str(e)}), 400


@app.post('/api/mazes/<name>')
def api_save_maze(name):
    body = request.get_json(force=True, silent=True) or {}
    text = body.get('text')
    if not isinstance(text, str):
        return jsonify({'status': 'error', 'message': 'text_required'}), 400
    try:
        save_maze_text(name, text)
    except GridFormatError as e:
        return _format_error(e)
    except ValueError as e:
        return jsonify({'status': 'error', 'message': str(e)}), 400
    return jsonify({'status': 'ok', 'name': name}), 200


@app.post('/api/solve')
def api_solve():
    body = request.get_json(force=True, silent=True) or {}
    mode = (body.get('mode') or DEFAULT_MODE).lower()
    if mode not in ALGORITHMS:
        return jsonify({'status': 'error', 'message': f'unknown_mode: {mode}'}), 400

    try:
        text = body.get('text')
        if not isinstance(text, str):
            name = body.get('name')
            if not name:
                return jsonify({'status': 'error', 'message': 'text_or_name_required'}), 400
            text = load_maze_text(name)
        grid = parse_grid(text)
    except FileNotFoundError as e:
        return jsonify({'status': 'error', 'message': str(e)}), 404
    except GridFormatError as e:
        return _format_error(e)
    except ValueError as e:
        return jsonify({'status': 'error', 'message': str(e)}), 400

    path = solve(grid, mode)
    # Both traversals end on the target exactly when they reach it
    found = grid.start == grid.target or (bool(path) and path[-1] == grid.target)
    print(f"[solve] mode={mode} size={grid.width}x{grid.height} cells={len(path)} found={found}")
    return jsonify({
        'status': 'ok',
        'mode': mode,
        'ascii': render_path(grid, path),
        'path': [list(p.as_tuple()) for p in path],
        'found': found,
        'width': grid.width,
        'height': grid.height,
    }), 200


if __name__ == '__main__':
    app.run(debug=True)
