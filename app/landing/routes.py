from dataclasses import dataclass

from flask import abort, current_app, render_template
from flask.typing import ResponseReturnValue

from app.common.countdown import TimeLeft, time_left
from app.common.forms import SubscribeForm
from app.extensions import subscription_service
from app.landing import landing_blueprint
from app.services.subscriptions import InvalidSubscriberError, SubscriptionError
from app.types import FormStatus, FormVariant

SIGNUP_BUTTON_TEXT = {
    FormVariant.HERO: "Get Insider Access",
    FormVariant.LEAD_MAGNET: "Send Me the Checklist",
    FormVariant.BOTTOM: "Join the Founding Members",
}


@dataclass
class SignupFormState:
    variant: FormVariant
    form: SubscribeForm
    button_text: str
    status: FormStatus = FormStatus.IDLE
    error_message: str = "Something went wrong. Please try again."

    @property
    def asks_for_first_name(self) -> bool:
        return self.variant is not FormVariant.HERO


def _blank_signup_form(variant: FormVariant) -> SignupFormState:
    return SignupFormState(
        variant=variant,
        form=SubscribeForm(prefix=variant.value, formdata=None),
        button_text=SIGNUP_BUTTON_TEXT[variant],
    )


def _render_landing_page(submitted: SignupFormState | None = None) -> ResponseReturnValue:
    signup_forms = {variant: _blank_signup_form(variant) for variant in SIGNUP_BUTTON_TEXT}
    if submitted:
        signup_forms[submitted.variant] = submitted

    launch_at = current_app.config["LAUNCH_AT"]
    return render_template(
        "landing/index.html",
        signup_forms=signup_forms,
        launch_at=launch_at,
        countdown_placeholder=TimeLeft.placeholder(),
        countdown=time_left(launch_at).display(),
    )


@landing_blueprint.get("/")
def index() -> ResponseReturnValue:
    return _render_landing_page()


@landing_blueprint.post("/subscribe/<form_variant:variant>")
def subscribe(variant: FormVariant) -> ResponseReturnValue:
    """The no-JavaScript path for the signup forms; the browser script posts to the JSON API instead."""
    if variant not in SIGNUP_BUTTON_TEXT:
        abort(404)

    state = SignupFormState(
        variant=variant,
        form=SubscribeForm(prefix=variant.value),
        button_text=SIGNUP_BUTTON_TEXT[variant],
    )

    if not state.form.validate_on_submit():
        state.status = FormStatus.ERROR
        first_error = next(iter(state.form.errors.values()), None)
        if first_error:
            state.error_message = first_error[0]
        return _render_landing_page(state)

    try:
        subscription_service.subscribe(state.form.email.data, first_name=state.form.first_name.data, source=variant)
    except (InvalidSubscriberError, SubscriptionError):
        state.status = FormStatus.ERROR
        return _render_landing_page(state)

    state = _blank_signup_form(variant)
    state.status = FormStatus.SUCCESS
    return _render_landing_page(state)
