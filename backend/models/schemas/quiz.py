"""Quiz questions and the answers the UI submits for them."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class QuizQuestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    text: str
    options: tuple[str, ...]
    category: str


class QuizAnswer(BaseModel):
    """One answer per question, as sent by the UI.

    ``answer`` holds either the selected option text or, when
    ``is_custom`` is set, the user's own free-text answer.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    question_id: int
    answer: str
    is_custom: bool = False
