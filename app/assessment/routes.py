from flask import current_app, redirect, render_template, session, url_for
from flask.typing import ResponseReturnValue

from app.assessment import assessment_blueprint
from app.assessment.forms import AssessmentAnswerForm
from app.assessment.questions import QUESTIONS
from app.assessment.wizard import SESSION_KEY, AssessmentState, AssessmentStep, InvalidAssessmentTransition
from app.common.forms import GenericSubmitForm, SubscribeForm
from app.extensions import subscription_service
from app.services.subscriptions import InvalidSubscriberError, SubscriptionError
from app.types import FormVariant


def _load_state() -> AssessmentState:
    return AssessmentState.from_session(session.get(SESSION_KEY))


def _save_state(state: AssessmentState) -> None:
    session[SESSION_KEY] = state.to_session_dict()


def _back_to_current_step() -> ResponseReturnValue:
    return redirect(url_for("assessment.show_step"))


def _email_form() -> SubscribeForm:
    return SubscribeForm(prefix=FormVariant.ASSESSMENT.value)


def _render_step(
    state: AssessmentState,
    *,
    form: GenericSubmitForm | AssessmentAnswerForm | SubscribeForm | None = None,
    subscribe_failed: bool = False,
) -> ResponseReturnValue:
    match state.step:
        case AssessmentStep.INTRO:
            return render_template(
                "assessment/intro.html", form=form or GenericSubmitForm(), question_count=len(QUESTIONS)
            )
        case AssessmentStep.EMAIL_CAPTURE:
            return render_template(
                "assessment/email_capture.html", form=form or _email_form(), subscribe_failed=subscribe_failed
            )
        case AssessmentStep.RESULTS:
            return render_template("assessment/results.html", profile=state.profile, restart_form=GenericSubmitForm())

    assert state.question is not None
    return render_template(
        "assessment/question.html",
        form=form or AssessmentAnswerForm.for_question(state.question),
        question_number=state.question_number,
        question_count=len(QUESTIONS),
    )


@assessment_blueprint.get("")
def show_step() -> ResponseReturnValue:
    state = _load_state()
    if SESSION_KEY not in session:
        _save_state(state)
    return _render_step(state)


@assessment_blueprint.post("/start")
def start() -> ResponseReturnValue:
    state = _load_state()
    form = GenericSubmitForm()
    if form.validate_on_submit():
        try:
            state.start()
        except InvalidAssessmentTransition:
            return _back_to_current_step()
        _save_state(state)

    return _back_to_current_step()


@assessment_blueprint.post("/answer")
def answer() -> ResponseReturnValue:
    state = _load_state()
    if state.question is None:
        return _back_to_current_step()

    form = AssessmentAnswerForm.for_question(state.question)
    if not form.validate_on_submit():
        return _render_step(state, form=form)

    state.answer(form.option.data)
    _save_state(state)
    return _back_to_current_step()


@assessment_blueprint.post("/email")
def capture_email() -> ResponseReturnValue:
    state = _load_state()
    if state.step != AssessmentStep.EMAIL_CAPTURE:
        return _back_to_current_step()

    form = _email_form()
    if not form.validate_on_submit():
        return _render_step(state, form=form)

    try:
        subscription_service.subscribe(
            form.email.data, first_name=form.first_name.data, source=FormVariant.ASSESSMENT
        )
    except (InvalidSubscriberError, SubscriptionError):
        current_app.logger.warning("Assessment email capture failed; respondent stays on the email step")
        return _render_step(state, form=form, subscribe_failed=True)

    state.complete()
    _save_state(state)
    return _back_to_current_step()


@assessment_blueprint.post("/restart")
def restart() -> ResponseReturnValue:
    form = GenericSubmitForm()
    if form.validate_on_submit():
        _save_state(AssessmentState())
    return _back_to_current_step()
