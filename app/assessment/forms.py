from flask_wtf import FlaskForm
from wtforms import RadioField
from wtforms.validators import InputRequired

from app.assessment.questions import AssessmentQuestion


class AssessmentAnswerForm(FlaskForm):
    option = RadioField(coerce=int, validators=[InputRequired("Select an answer")])

    @classmethod
    def for_question(cls, question: AssessmentQuestion) -> "AssessmentAnswerForm":
        form = cls()
        form.option.label.text = question.prompt
        form.option.choices = list(enumerate(question.options))
        return form
