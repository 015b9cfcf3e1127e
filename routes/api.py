from flask import abort, jsonify, request, session
from werkzeug.exceptions import HTTPException

from . import api_bp
from services.course_state import get_state
from services.detail_lookup import course_options, current_selection, lookup, select_course
from services.graph_projector import VIEW_ALL, build_view


@api_bp.route("/graph")
def graph():
    view = (request.args.get("view") or VIEW_ALL).strip()
    course = (request.args.get("course") or "").strip() or None

    try:
        result = build_view(get_state(), view, course)
    except ValueError as e:
        abort(400, description=str(e))

    return jsonify({"view": view, "course": course, **result.to_vis()})


@api_bp.route("/courses")
def list_courses():
    return jsonify(course_options(get_state().syllabus))


@api_bp.route("/courses/<path:name>")
def course_detail(name: str):
    rec = lookup(get_state().syllabus, name)
    if rec is None:
        abort(404, description=f"No course named {name!r}")
    return jsonify(rec.to_dict())


@api_bp.route("/selection", methods=["GET"])
def get_selection():
    return jsonify(current_selection(session))


@api_bp.route("/selection", methods=["POST"])
def set_selection():
    payload = request.get_json(silent=True) or {}
    name = str(payload.get("course") or "").strip()
    if not name:
        abort(400, description="Field 'course' is required.")

    # a miss keeps whatever the panel showed before
    rec = select_course(session, get_state().syllabus, name)
    if rec is None:
        abort(404, description=f"No course named {name!r}")
    return jsonify(rec.to_dict())


@api_bp.errorhandler(HTTPException)
def api_error(e: HTTPException):
    # the page's fetch() calls expect JSON, not Flask's HTML error page
    return jsonify({"error": e.name, "description": e.description}), e.code
