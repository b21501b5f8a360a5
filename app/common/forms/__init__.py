from flask_wtf import FlaskForm
from wtforms import EmailField, StringField
from wtforms.fields.simple import SubmitField
from wtforms.validators import DataRequired, Optional

import app.common.forms.validators as validators

__all__ = ["validators", "GenericSubmitForm", "SubscribeForm"]


def strip_string_if_not_empty(value: str | None) -> str | None:
    return value.strip() if value else value


class GenericSubmitForm(FlaskForm):
    submit = SubmitField()


class SubscribeForm(FlaskForm):
    """Email capture, shared by every variant of the signup form and the assessment.

    Several of these appear on the same page, so always construct it with `prefix=<variant>` to keep field names
    and ids apart.
    """

    email = EmailField(
        "Email",
        filters=[strip_string_if_not_empty],
        validators=[DataRequired("Enter your email"), validators.ContainsAtSign()],
    )
    first_name = StringField("First name", filters=[strip_string_if_not_empty], validators=[Optional()])
    submit = SubmitField()
