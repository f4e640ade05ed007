from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    """Submission JSON routes. Errors propagate to the app's error handlers."""

    service = container.submission_service

    def _json_body() -> dict:
        body = request.get_json(silent=True)
        return body if isinstance(body, dict) else {}

    @app.route("/api/submissions", methods=["POST"], endpoint="create_submission")
    def create_submission():
        sub = service.create_submission(_json_body())
        return jsonify(sub.to_dict()), 201

    @app.route("/api/submissions", methods=["GET"], endpoint="list_submissions")
    def list_submissions():
        return jsonify([s.to_dict() for s in service.list_submissions()])

    @app.route("/api/submissions/<int:submission_id>", methods=["GET"], endpoint="get_submission")
    def get_submission(submission_id: int):
        return jsonify(service.get_submission(submission_id).to_dict())

    @app.route("/api/submissions/search/<path:term>", methods=["GET"], endpoint="search_submissions")
    def search_submissions(term: str):
        return jsonify([s.to_dict() for s in service.search_submissions(term)])

    @app.route("/api/submissions/<int:submission_id>/status", methods=["PUT"], endpoint="update_submission_status")
    def update_submission_status(submission_id: int):
        sub = service.update_status(submission_id, _json_body().get("status"))
        return jsonify(sub.to_dict())

    @app.route("/api/submissions/<int:submission_id>", methods=["DELETE"], endpoint="delete_submission")
    def delete_submission(submission_id: int):
        service.delete_submission(submission_id)
        return jsonify({"message": "Submission deleted successfully"})

    @app.route("/api/submissions/delete", methods=["POST"], endpoint="delete_submissions")
    def delete_submissions():
        deleted = service.delete_submissions(_json_body().get("ids"))
        return jsonify({"message": f"{deleted} submissions deleted successfully", "deleted": deleted})

    @app.route("/api/submissions", methods=["DELETE"], endpoint="clear_submissions")
    def clear_submissions():
        service.clear_submissions()
        return jsonify({"message": "All submissions cleared successfully"})
