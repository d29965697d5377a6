"""All prompt templates for Gemini API calls.

Replies are requested in Albanian to match the UI.
"""

import json
from collections.abc import Sequence

from models.schemas.interview import AnswerReview, Difficulty, InterviewMessage, InterviewMode
from models.schemas.quiz import QuizAnswer

CAREER_ADVISOR_SYSTEM = (
    "Ti je këshilltar karriere për tregun shqiptar. "
    "Jep përgjigje profesionale dhe konkrete."
)

INTERVIEWER_SYSTEM = "Ti je intervistues teknik. Gjithmonë përgjigju në shqip me pyetje të qarta."

EVALUATOR_SYSTEM = "Ti je intervistues dhe vlerësues. Jep feedback të shkurtër dhe praktik në shqip."

HIRING_MANAGER_SYSTEM = (
    "Ti je menaxher punësimi. Vendos qartë nëse kandidati pranohet "
    "dhe jep feedback në shqip."
)

MODE_INSTRUCTIONS: dict[InterviewMode, str] = {
    InterviewMode.TECHNICAL: "Fokusohu te njohuritë teknike dhe zgjidhja e problemeve të fushës.",
    InterviewMode.BEHAVIORAL: "Fokusohu te sjellja, përvojat e kaluara dhe puna në ekip (metoda STAR).",
    InterviewMode.MIXED: "Kombino pyetje teknike me pyetje mbi sjelljen dhe përvojën.",
    InterviewMode.STRESS: "Bëj pyetje sfiduese dhe me presion kohor, por gjithmonë profesionale.",
}


def _serialize(items: Sequence) -> str:
    return json.dumps(
        [item.model_dump(by_alias=True, mode="json") for item in items],
        ensure_ascii=False,
    )


def build_enrichment_prompt(answers: Sequence[QuizAnswer], primary_career: str) -> str:
    """Ask for a short justification of the locally chosen career.

    The career itself is fixed; the model only explains the fit.
    """
    return f"""Bazuar në përgjigjet e mëposhtme të kuizit të orientimit në karrierë,
karriera më e përshtatshme për përdoruesin është: {primary_career}.

Shpjego në 2-3 fjali pse kjo karrierë i përshtatet profilit të përdoruesit,
duke iu referuar përgjigjeve konkrete. Mos sugjero karrierë tjetër.
Përgjigju vetëm në shqip, pa JSON dhe pa tituj.

Përgjigjet e përdoruesit: {_serialize(answers)}"""


def build_interview_question_prompt(
    career: str,
    history: Sequence[InterviewMessage],
    difficulty: Difficulty,
    mode: InterviewMode,
) -> str:
    return f"""Ti je intervistues ekspert për {career}. Niveli i vështirësisë: {difficulty.value}.
{MODE_INSTRUCTIONS[mode]}
Bëj një pyetje të vetme, specifike për fushën. Mos e përsërit asnjë pyetje nga historia.
Historia: {_serialize(history)}"""


def build_answer_evaluation_prompt(career: str, question: str, answer: str) -> str:
    return f"""Si intervistues për {career}, vlerëso këtë përgjigje në shqip.

Pyetja: {question}
Përgjigjja: {answer}

Kthe vetëm JSON valid (pa markdown) në këtë format:
{{
  "score": <numër i plotë 0-100>,
  "strengths": [<1-3 pika të forta të përgjigjes>],
  "improvements": [<1-3 përmirësime konkrete>],
  "comment": "<1-2 fjali feedback>"
}}"""


def build_hint_prompt(career: str, question: str) -> str:
    return f"""Kandidati për {career} ka nevojë për një ndihmë të vogël për pyetjen:
"{question}"

Jep një sugjerim të shkurtër (1-2 fjali) që e drejton kandidatin pa i dhënë përgjigjen e plotë.
Përgjigju vetëm në shqip."""


def build_final_verdict_prompt(career: str, history: Sequence[InterviewMessage]) -> str:
    return f"""Analizo performancën e plotë të intervistës për {career}.
Kthe vetëm JSON valid në formatin:
{{"hired": true/false, "feedback": "..."}}
Historia: {_serialize(history)}"""


def build_report_prompt(
    career: str,
    mode: InterviewMode,
    history: Sequence[InterviewMessage],
    answers_review: Sequence[AnswerReview],
) -> str:
    return f"""Përgatit raportin përfundimtar të një interviste praktike për {career} (mënyra: {mode.value}).

Historia e bisedës: {_serialize(history)}
Vlerësimet e përgjigjeve: {_serialize(answers_review)}

Kthe vetëm JSON valid (pa markdown) në këtë format:
{{
  "score": <numër i plotë 0-100, vlerësimi i përgjithshëm>,
  "summary": "<2-3 fjali përmbledhje>",
  "categoryScores": {{
    "technical": <0-100>,
    "communication": <0-100>,
    "problemSolving": <0-100>,
    "cultureFit": <0-100>
  }},
  "strengths": [<pikat e forta>],
  "improvements": [<fushat për përmirësim>],
  "recommendations": [<2-4 rekomandime konkrete>],
  "weakTopics": [<temat ku kandidati ishte i dobët>],
  "practiceSuggestions": [<2-4 ushtrime praktike>]
}}"""


def build_assistant_system_prompt(career: str | None = None) -> str:
    context = (
        f"Përdoruesi u përputh me karrierën: {career}" if career else "Këshilla të përgjithshme"
    )
    return (
        'Ti je "Busulla AI", një career coach për tregun shqiptar. Gjithmonë përgjigju në shqip, '
        f"profesional, i drejtpërdrejtë dhe praktik. Konteksti i përdoruesit: {context}."
    )
