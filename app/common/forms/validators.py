from wtforms.fields.core import Field
from wtforms.form import BaseForm
from wtforms.validators import ValidationError


class ContainsAtSign:
    """
    The same loose email check the subscribe API applies: the value must contain an "@". Anything stricter is left to
    the mailing-list provider.
    """

    def __init__(self, message: str = "Valid email is required") -> None:
        self.message = message

    def __call__(self, form: BaseForm, field: Field) -> None:
        if not field.data:
            return  # Don't validate empty fields - use DataRequired for that

        if "@" not in field.data:
            raise ValidationError(self.message)
