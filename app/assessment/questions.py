import dataclasses
from collections.abc import Sequence


@dataclasses.dataclass(frozen=True)
class AssessmentQuestion:
    prompt: str
    options: tuple[str, str, str, str]


@dataclasses.dataclass(frozen=True)
class Profile:
    type: str
    emoji: str
    description: str
    recommendations: tuple[str, str, str]
    cta: str


QUESTIONS: tuple[AssessmentQuestion, ...] = (
    AssessmentQuestion(
        prompt="Which best describes your role?",
        options=(
            "Chief communications officer or VP",
            "Director or head of internal communications",
            "Communications manager or team lead",
            "Individual practitioner or specialist",
        ),
    ),
    AssessmentQuestion(
        prompt="What is your biggest challenge with AI right now?",
        options=(
            "Knowing which AI tools are actually worth adopting",
            "Turning AI output into stories that resonate",
            "Getting my team and leadership to buy in",
            "Building workflows we can repeat every week",
        ),
    ),
    AssessmentQuestion(
        prompt="How is your team using AI today?",
        options=(
            "We are not using it yet",
            "A few people are experimenting on their own",
            "It is part of some of our workflows",
            "It is embedded across most of our work",
        ),
    ),
    AssessmentQuestion(
        prompt="How does your leadership see AI in communications?",
        options=(
            "Sceptical: they want proof before investing",
            "Curious: they are asking questions but have no plan",
            "Supportive: they have given us a mandate",
            "Impatient: they expect results yesterday",
        ),
    ),
    AssessmentQuestion(
        prompt="What would make the biggest difference for you in the next 90 days?",
        options=(
            "A clear storytelling strategy for the AI era",
            "Hands-on guidance with the right AI tools",
            "Proven frameworks and templates my team can reuse",
            "A community of peers navigating the same shift",
        ),
    ),
)

CHALLENGE_QUESTION = 1
DIFFERENCE_QUESTION = 4

STRATEGIC_NARRATOR = Profile(
    type="Strategic Narrator",
    emoji="🎙️",
    description=(
        "You know that AI can produce words, but only people can produce meaning. Your edge is turning "
        "information into stories that move your organisation."
    ),
    recommendations=(
        "Use the Micro-Arc Framework to give every update a beginning, a turn and a takeaway",
        "Let AI draft the facts and keep the narrative decisions for yourself",
        "Build a library of leadership stories your team can draw on",
    ),
    cta="Start with the episode on storytelling that drives understanding, not drama.",
)

AI_PIONEER = Profile(
    type="AI Pioneer",
    emoji="🚀",
    description=(
        "You are ready to move fast and want to know which tools are worth your team's time. Your edge is "
        "experimenting early and bringing back what works."
    ),
    recommendations=(
        "Pick one recurring deliverable and pilot an AI-assisted version for 30 days",
        "Keep a shared log of prompts and results so wins are repeatable",
        "Set simple guardrails for tone, accuracy and approval before scaling up",
    ),
    cta="Join the founding members list for the tool deep-dives before anyone else.",
)

FRAMEWORK_BUILDER = Profile(
    type="Framework Builder",
    emoji="🛠️",
    description=(
        "You want structure, not hype. Your edge is turning good ideas into systems your team can run every "
        "week without you in the room."
    ),
    recommendations=(
        "Map your content workflow and mark the steps AI can take off your plate",
        "Adopt the Voice Note Blueprint to capture leader insight in minutes",
        "Document each new workflow as a one-page template before rolling it out",
    ),
    cta="Grab the AI Readiness Checklist and build your 90-day roadmap.",
)

MOVEMENT_MAKER = Profile(
    type="Movement Maker",
    emoji="🤝",
    description=(
        "You know change only sticks when people believe in it. Your edge is bringing your team and your "
        "leadership along with you."
    ),
    recommendations=(
        "Share one small AI win with leadership every month to build momentum",
        "Invite sceptics to co-design the first experiment",
        "Connect with peers who are leading the same change in their organisations",
    ),
    cta="Become a founding member and help shape the conversations on the show.",
)

PROFILES: tuple[Profile, ...] = (STRATEGIC_NARRATOR, AI_PIONEER, FRAMEWORK_BUILDER, MOVEMENT_MAKER)


def classify(answers: Sequence[int]) -> Profile:
    """Pick the respondent's profile from their five answers.

    Only the "biggest challenge" and "biggest difference" answers are considered, and the rules are checked in order
    with the first match winning. The two questions are interleaved within each rule, so a challenge
    answer of 0 loses to a difference answer of 0.
    """
    if len(answers) != len(QUESTIONS):
        raise ValueError(f"Expected {len(QUESTIONS)} answers, got {len(answers)}")

    challenge, difference = answers[CHALLENGE_QUESTION], answers[DIFFERENCE_QUESTION]

    if challenge == 1 or difference == 0:
        return STRATEGIC_NARRATOR
    if challenge == 0 or difference == 1:
        return AI_PIONEER
    if challenge == 3 or difference == 2:
        return FRAMEWORK_BUILDER
    return MOVEMENT_MAKER
