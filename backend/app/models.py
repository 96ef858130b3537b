from app import db


class User(db.Model):
    __tablename__ = 'user'
    # Internal user identifier issued by the game front end
    id = db.Column(db.String(128), primary_key=True)
    display_name = db.Column(db.String(64), nullable=True)
    # LINE Messaging API user id; notifications cannot be pushed without it
    line_user_id = db.Column(db.String(64), nullable=True)

    def to_dict(self):
        return {
            'id': self.id,
            'display_name': self.display_name,
            'line_user_id': self.line_user_id,
        }
