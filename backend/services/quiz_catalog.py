"""Quiz questions and the option -> trait rule table.

Option texts are the Albanian strings the UI renders; rule keys are
lowercase substrings of them. Rules are scanned in declaration order and
the first key contained in an answer wins, so the order here is significant.
"""

from typing import NamedTuple

from models.schemas.quiz import QuizQuestion
from models.schemas.traits import (
    A, CA, CR, EN, LE, OR, RE, SO, TE, VI,
    Trait,
    TraitWeights,
    frozen_weights,
)


class OptionTraitRule(NamedTuple):
    match_key: str
    contribution: TraitWeights


def _rule(match_key: str, contribution: dict[Trait, float]) -> OptionTraitRule:
    return OptionTraitRule(match_key, frozen_weights(contribution))


# Added on top of any rule match when the user typed their own answer
CUSTOM_ANSWER_BONUS: TraitWeights = frozen_weights({RE: 1, EN: 1})

OPTION_TRAIT_RULES: tuple[OptionTraitRule, ...] = (
    # Q1 - work style
    _rule("vetëm, në një mjedis", {A: 2, TE: 1, RE: 1}),
    _rule("në ekip, me bashkëpunim", {SO: 2, LE: 1, OR: 1}),
    _rule("hibrid", {OR: 1, SO: 1, A: 1}),
    _rule("në lëvizje të vazhdueshme", {SO: 2, EN: 1, CA: 1}),
    # Q2 - motivation
    _rule("zgjidhja e problemeve komplekse", {A: 3, TE: 2, RE: 1}),
    _rule("krijimi i diçkaje vizuale", {CR: 3, VI: 2}),
    _rule("ndihma direkte për njerëzit", {CA: 3, SO: 2}),
    _rule("arritja e objektivave financiare", {EN: 3, LE: 1, OR: 1}),
    # Q3 - crisis management
    _rule("analizoj të dhënat", {A: 3, TE: 1, RE: 1}),
    _rule("intuitën dhe kreativitetin", {CR: 2, VI: 1, EN: 1}),
    _rule("kërkoj ndihmë nga ekipi", {SO: 2, LE: 2, OR: 1}),
    _rule("qëndroj i qetë dhe ndjek", {OR: 3, CA: 1}),
    # Q4 - strongest skill
    _rule("mendimi analitik dhe matematika", {A: 3, TE: 2, RE: 1}),
    _rule("komunikimi dhe bindja", {SO: 3, LE: 2, EN: 1}),
    _rule("dizajni dhe estetika", {VI: 3, CR: 3}),
    _rule("organizimi dhe menaxhimi", {OR: 3, LE: 2}),
    # Q5 - productive environment
    _rule("zyrë moderne korporative", {OR: 2, LE: 1, EN: 1}),
    _rule("studio krijuese", {CR: 3, VI: 2}),
    _rule("në terren (jashtë", {SO: 2, CA: 2, EN: 1}),
    _rule("shtëpia ose hapësira bashkëpunuese", {A: 1, TE: 1, RE: 1}),
    # Q6 - importance of innovation
    _rule("thelbësore, dua të punoj me teknologjinë", {TE: 3, RE: 2, A: 1}),
    _rule("e rëndësishme, por stabiliteti", {OR: 2, A: 1}),
    _rule("mesatare, preferoj metodat", {OR: 2, CA: 1}),
    _rule("nuk ka rëndësi, për sa kohë", {CA: 2, SO: 2}),
    # Q7 - learning style
    _rule("mësoj duke lexuar dhe studiuar", {A: 2, RE: 2, TE: 1}),
    _rule("mësoj duke vepruar", {TE: 2, EN: 1, CR: 1}),
    _rule("mësoj përmes diskutimeve", {SO: 3, LE: 1}),
    _rule("mësoj përmes videove dhe ilustrimeve", {VI: 2, CR: 1}),
    # Q8 - five-year goal
    _rule("të bëhem ekspert", {A: 2, TE: 2, RE: 2}),
    _rule("të menaxhoj një ekip", {LE: 3, OR: 2, SO: 1}),
    _rule("të hap biznesin", {EN: 3, LE: 2, CR: 1}),
    _rule("të kontribuoj në një kauzë sociale", {CA: 3, SO: 2}),
    # Q9 - stress management
    _rule("duke u fokusuar plotësisht", {A: 2, TE: 1, OR: 1}),
    _rule("duke bërë pushime të shkurtra dhe biseduar", {SO: 2, CA: 1}),
    _rule("duke medituar ose bërë aktivitet fizik", {CA: 2, OR: 1}),
    _rule("duke kërkuar feedback dhe mbështetje", {SO: 2, LE: 1, RE: 1}),
    # Q10 - field of study
    _rule("shkencat kompjuterike dhe ai", {TE: 3, A: 2, RE: 2}),
    _rule("psikologjia dhe shkencat sociale", {SO: 3, CA: 2, RE: 1}),
    _rule("menaxhimi dhe ekonomia", {EN: 3, LE: 2, OR: 1}),
    _rule("mjekësia dhe shkencat e jetës", {CA: 3, RE: 2, A: 1}),
)


QUIZ_QUESTIONS: tuple[QuizQuestion, ...] = (
    QuizQuestion(
        id=1,
        text="Si preferoni të punoni gjatë ditës?",
        options=(
            "Vetëm, në një mjedis të qetë dhe të fokusuar",
            "Në ekip, me bashkëpunim të vazhdueshëm",
            "Hibrid - kohë të balancuar vetëm dhe në grup",
            "Në lëvizje të vazhdueshme dhe me njerëz të rinj",
        ),
        category="Mjedisi",
    ),
    QuizQuestion(
        id=2,
        text="Çfarë ju motivon më shumë në një projekt?",
        options=(
            "Zgjidhja e problemeve komplekse teknike",
            "Krijimi i diçkaje vizuale dhe artistike",
            "Ndihma direkte për njerëzit e tjerë",
            "Arritja e objektivave financiare dhe rritja e biznesit",
        ),
        category="Motivimi",
    ),
    QuizQuestion(
        id=3,
        text="Si reagoni ndaj situatave të paparashikuara?",
        options=(
            "Analizoj të dhënat dhe gjej një zgjidhje logjike",
            "Përdor intuitën dhe kreativitetin për të improvizuar",
            "Kërkoj ndihmë nga ekipi dhe delegoj detyrat",
            "Qëndroj i qetë dhe ndjek procedurat e paracaktuara",
        ),
        category="Menaxhimi i krizës",
    ),
    QuizQuestion(
        id=4,
        text="Cila nga këto aftësi mendoni se është pika juaj më e fortë?",
        options=(
            "Mendimi analitik dhe matematika",
            "Komunikimi dhe bindja e të tjerëve",
            "Dizajni dhe estetika",
            "Organizimi dhe menaxhimi i kohës",
        ),
        category="Aftësitë",
    ),
    QuizQuestion(
        id=5,
        text="Në çfarë lloj mjedisi ndiheni më produktiv?",
        options=(
            "Një zyrë moderne korporative",
            "Një studio krijuese ose punishte",
            "Në terren (jashtë zyrës)",
            "Nga shtëpia ose hapësira bashkëpunuese",
        ),
        category="Mjedisi",
    ),
    QuizQuestion(
        id=6,
        text="Sa rëndësi ka inovacioni për ju në punë?",
        options=(
            "Thelbësore, dua të punoj me teknologjinë e fundit",
            "E rëndësishme, por stabiliteti vjen i pari",
            "Mesatare, preferoj metodat e provuara",
            "Nuk ka rëndësi, për sa kohë puna ka impakt",
        ),
        category="Inovacioni",
    ),
    QuizQuestion(
        id=7,
        text="Si do ta përshkruanit stilin tuaj të mësimit?",
        options=(
            "Mësoj duke lexuar dhe studiuar teori",
            "Mësoj duke vepruar (praktikisht)",
            "Mësoj përmes diskutimeve me të tjerët",
            "Mësoj përmes videove dhe ilustrimeve",
        ),
        category="Të mësuarit",
    ),
    QuizQuestion(
        id=8,
        text="Cili është qëllimi juaj kryesor në 5 vitet e ardhshme?",
        options=(
            "Të bëhem ekspert në një fushë të ngushtë",
            "Të menaxhoj një ekip të madh njerëzish",
            "Të hap biznesin tim personal",
            "Të kontribuoj në një kauzë sociale",
        ),
        category="Qëllimet",
    ),
    QuizQuestion(
        id=9,
        text="Si e menaxhoni stresin në punë?",
        options=(
            "Duke u fokusuar plotësisht te puna deri në fund",
            "Duke bërë pushime të shkurtra dhe biseduar me koleget",
            "Duke medituar ose bërë aktivitet fizik",
            "Duke kërkuar feedback dhe mbështetje",
        ),
        category="Stresi",
    ),
    QuizQuestion(
        id=10,
        text="Cila fushë ju duket më interesante për të studiuar?",
        options=(
            "Shkencat kompjuterike dhe AI",
            "Psikologjia dhe shkencat sociale",
            "Menaxhimi dhe ekonomia",
            "Mjekësia dhe shkencat e jetës",
        ),
        category="Interesat",
    ),
)
