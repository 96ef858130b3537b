from dataclasses import dataclass

LOSS_TEMPLATE = (
    "ゲームオーバー！\n"
    "残念ながら、福工大前で降りることができませんでした。\n"
    "スコア: 0点\n"
    "\n"
    "もう一度チャレンジしてみましょう！"
)

SUCCESS_TEMPLATE = (
    "おめでとうございます！\n"
    "福工大前で無事に降りることができました！\n"
    "スコア: {score}点"
)


@dataclass(frozen=True)
class NotificationMessage:
    text: str
    type: str = 'text'

    def to_dict(self):
        return {'type': self.type, 'text': self.text}


def _format_score(score) -> str:
    # JSON numbers arrive as float when they carry a fractional part
    if isinstance(score, float) and score.is_integer():
        return str(int(score))
    return str(score)


def compose_message(score, is_game_over: bool) -> NotificationMessage:
    """Build the text sent to the player.

    A loss always reports zero regardless of ``score``.
    """
    if is_game_over:
        return NotificationMessage(text=LOSS_TEMPLATE)
    return NotificationMessage(text=SUCCESS_TEMPLATE.format(score=_format_score(score)))
