"""Career archetype registry used by the classifier.

Registry order doubles as the tie-break order when two careers score the same.
"""

from models.schemas.career import CareerProfile
from models.schemas.traits import A, CA, CR, EN, LE, OR, RE, SO, TE, VI

CAREER_PROFILES: tuple[CareerProfile, ...] = (
    CareerProfile(
        name="Zhvillues Software",
        traits={A: 3, TE: 3, RE: 2, OR: 1},
        description=(
            "Ndërtoni aplikacione dhe sisteme softuerike, duke zgjidhur "
            "probleme komplekse teknike çdo ditë."
        ),
        learning_path=(
            "Mësoni bazat e programimit (Python ose JavaScript)",
            "Studioni strukturat e të dhënave dhe algoritmet",
            "Ndërtoni projekte personale dhe kontribuoni në open-source",
            "Fitoni përvojë me cloud (AWS/GCP) dhe DevOps",
            "Aplikoni për role junior developer dhe ndërtoni portfolio",
        ),
    ),
    CareerProfile(
        name="Shkencëtar të Dhënash",
        traits={A: 3, TE: 2, RE: 3, VI: 1},
        description=(
            "Analizoni grumbuj të mëdhenj të dhënash, krijoni modele ML dhe "
            "nxirrni insight-e që drejtojnë vendimet e biznesit."
        ),
        learning_path=(
            "Forconi bazat e statistikës dhe matematikës",
            "Mësoni Python (pandas, scikit-learn, PyTorch)",
            "Praktikoni me dataset-e reale në Kaggle",
            "Studioni machine learning dhe deep learning",
            "Ndërtoni portfolio me projekte analize dhe parashikim",
        ),
    ),
    CareerProfile(
        name="Dizajner UX/UI",
        traits={VI: 3, CR: 3, SO: 2, A: 1},
        description=(
            "Krijoni eksperienca digjitale intuitive dhe estetikisht tërheqëse "
            "duke vendosur përdoruesin në qendër."
        ),
        learning_path=(
            "Mësoni parimet e dizajnit dhe tipografisë",
            "Zotëroni Figma dhe mjete prototipimi",
            "Studioni user research dhe metodologjitë UX",
            "Ndërtoni case study-et e forta dizajni",
            "Aplikoni në studio dizajni ose agjenci digjitale",
        ),
    ),
    CareerProfile(
        name="Menaxher Projekti",
        traits={OR: 3, LE: 3, SO: 2, EN: 1},
        description=(
            "Koordinoni ekipe, burime dhe afate për të dorëzuar projekte me "
            "sukses brenda buxhetit dhe kohës."
        ),
        learning_path=(
            "Fitoni certifikimin PMP ose PRINCE2",
            "Mësoni metodologjitë Agile dhe Scrum",
            "Zhvilloni aftësi komunikimi dhe negocimi",
            "Praktikoni me mjete si Jira, Asana dhe MS Project",
            "Ndërtoni përvojë duke menaxhuar projekte të vogla",
        ),
    ),
    CareerProfile(
        name="Sipërmarrës / Themelues Startup",
        traits={EN: 3, LE: 2, CR: 2, SO: 1},
        description=(
            "Ndërtoni biznesin tuaj nga zero, duke identifikuar mundësi tregu "
            "dhe duke krijuar produkte ose shërbime novatore."
        ),
        learning_path=(
            "Studioni modelet e biznesit dhe Lean Startup",
            "Mësoni bazat e financave dhe menaxhimit financiar",
            "Ndërtoni rrjetin tuaj profesional",
            "Fitoni përvojë praktike në startup-e ekzistuese",
            "Zhvilloni MVP-në tuaj të parë dhe testoni me treg",
        ),
    ),
    CareerProfile(
        name="Psikolog / Këshilltar",
        traits={CA: 3, SO: 3, RE: 1, A: 1},
        description=(
            "Ndihmoni individë dhe grupe të kapërcejnë sfidat emocionale dhe "
            "psikologjike për një jetë më të mirë."
        ),
        learning_path=(
            "Studioni psikologjinë klinike ose këshillimin",
            "Fitoni licencën profesionale të psikologut",
            "Kryeni praktikë klinike të mbikëqyrur",
            "Specializohuni (terapia CBT, çiftet, fëmijët)",
            "Ndërtoni praktikën private ose bashkohuni me klinikë",
        ),
    ),
    CareerProfile(
        name="Mjek / Profesionist Shëndetësor",
        traits={CA: 3, RE: 2, A: 2, OR: 1},
        description=(
            "Diagnostikoni dhe trajtoni sëmundjet, duke kombinuar njohuritë "
            "shkencore me kujdesin human për pacientët."
        ),
        learning_path=(
            "Kryeni studimet e mjekësisë (6 vjet)",
            "Kryeni rezidencën në specialitetin e zgjedhur",
            "Merrni licencën e ushtrimit të mjekësisë",
            "Specializohuni dhe ndiqni edukimin e vazhdueshëm",
            "Konsideroni kërkimin shkencor ose diplomacinë shëndetësore",
        ),
    ),
    CareerProfile(
        name="Menaxher Marketingu",
        traits={SO: 2, CR: 2, EN: 2, A: 1, VI: 1},
        description=(
            "Zhvilloni strategji marketingu, ndërtoni brande dhe drejtoni "
            "fushatat që rrisin biznesin."
        ),
        learning_path=(
            "Studioni marketingun digjital dhe traditional",
            "Mësoni SEO, SEM, social media dhe email marketing",
            "Zotëroni mjete analitike (Google Analytics, Meta Ads)",
            "Ndërtoni portfolio me fushata reale",
            "Fitoni certifikime Google, HubSpot ose Meta",
        ),
    ),
    CareerProfile(
        name="Inxhinier / Arkitekt",
        traits={TE: 3, A: 2, OR: 2, VI: 1},
        description=(
            "Projektoni dhe ndërtoni infrastruktura, ndërtesa ose sisteme "
            "inxhinierike që formësojnë botën fizike."
        ),
        learning_path=(
            "Studioni inxhinierinë ose arkitekturën (5 vjet)",
            "Zotëroni softuerin CAD/BIM (AutoCAD, Revit)",
            "Fitoni licencën profesionale të inxhinierit",
            "Ndërtoni portofolin me projekte të ndryshme",
            "Specializohuni në fushën e preferuar (civile, elektrike, mekanike)",
        ),
    ),
    CareerProfile(
        name="Mësues / Trajner",
        traits={SO: 3, CA: 2, OR: 1, RE: 1, LE: 1},
        description=(
            "Transmetoni njohuri dhe aftësi, duke inspiruar dhe aftësuar "
            "brezat e ardhshëm ose profesionistët."
        ),
        learning_path=(
            "Studioni pedagogjinë ose fushën e specializimit",
            "Fitoni diplomën e mësimdhënies ose certifikimin e trajnerëve",
            "Zhvilloni kurrikula dhe materiale mësimore",
            "Eksperimentoni me metodologji mësimore inovative",
            "Konsideroni platformat e mësimit online (Udemy, Coursera)",
        ),
    ),
)
