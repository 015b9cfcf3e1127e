from flask import render_template, session

from . import main_bp
from models.syllabus_record import SYLLABUS_FIELDS
from services.course_state import get_state
from services.detail_lookup import course_options, current_selection
from services.graph_projector import full_graph


@main_bp.route("/subjectGraph")
def subject_graph():
    state = get_state()
    return render_template(
        "subject_graph.html",
        courses=course_options(state.syllabus),
        selected=current_selection(session),
        detail_fields=SYLLABUS_FIELDS,
        # initial render is the full graph; buttons swap data in place later
        graph=full_graph(state).to_vis(),
    )
