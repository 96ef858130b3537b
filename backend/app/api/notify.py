from flask import Blueprint, jsonify, request, current_app
from app.services.notifications import MessagingIdentifierMissing, UserNotFound


notify = Blueprint('notify', __name__)


@notify.route('/line-notify', methods=['POST'])
def line_notify():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    user_id = data.get('userId')
    if not user_id:
        return jsonify({'error': 'userId is required'}), 400
    score = data.get('score')
    if score is None:
        score = 0
    is_game_over = bool(data.get('isGameOver'))

    relay = current_app.extensions['notification_relay']
    try:
        relay.notify(user_id, score, is_game_over)
    except UserNotFound:
        current_app.logger.info(f"[line-notify] user={user_id} not found")
        return jsonify({'error': 'user not found'}), 404
    except MessagingIdentifierMissing:
        current_app.logger.info(f"[line-notify] user={user_id} has no LINE user id")
        return jsonify({'error': 'messaging identifier missing'}), 400
    except Exception as exc:
        # Provider and storage details stay in the log, not in the response
        current_app.logger.exception(f"[line-notify] user={user_id} push failed: {exc}")
        return jsonify({'error': 'notification failed'}), 500

    current_app.logger.info(f"[line-notify] user={user_id} game_over={is_game_over} pushed")
    return jsonify({'success': True})
