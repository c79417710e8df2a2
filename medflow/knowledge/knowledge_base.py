"""
MedFlow — Статична медична база знань

Таблиці, що імітують результат RAG-пошуку:
- MEDICAL_KNOWLEDGE_BASE: симптом → [(умова, ймовірність, спеціаліст)]
- CONDITION_DESCRIPTIONS: умова → опис
- CONDITION_TESTS: умова → рекомендовані обстеження
- SPECIALIST_DATABASE: довідник спеціалістів
- COMMON_SYMPTOMS: швидкий вибір у формі
"""

from dataclasses import dataclass
from typing import Dict, List

from medflow.schemas import SpecialistInfo, SpecialistType


@dataclass(frozen=True)
class KnowledgeEntry:
    """Один рядок бази знань"""
    condition: str
    probability: float
    specialist: SpecialistType


GP = SpecialistType.GENERAL_PRACTITIONER


# Ключі: симптоми в нижньому регістрі
MEDICAL_KNOWLEDGE_BASE: Dict[str, List[KnowledgeEntry]] = {
    "headache": [
        KnowledgeEntry("Tension Headache", 0.7, GP),
        KnowledgeEntry("Migraine", 0.5, SpecialistType.NEUROLOGIST),
        KnowledgeEntry("Sinusitis", 0.3, GP),
    ],
    "chest pain": [
        KnowledgeEntry("Angina", 0.6, SpecialistType.CARDIOLOGIST),
        KnowledgeEntry("Gastroesophageal Reflux", 0.4, SpecialistType.GASTROENTEROLOGIST),
        KnowledgeEntry("Muscle Strain", 0.3, GP),
    ],
    "fever": [
        KnowledgeEntry("Viral Infection", 0.7, GP),
        KnowledgeEntry("Bacterial Infection", 0.5, GP),
        KnowledgeEntry("COVID-19", 0.4, SpecialistType.PULMONOLOGIST),
    ],
    "rash": [
        KnowledgeEntry("Contact Dermatitis", 0.6, SpecialistType.DERMATOLOGIST),
        KnowledgeEntry("Eczema", 0.5, SpecialistType.DERMATOLOGIST),
        KnowledgeEntry("Allergic Reaction", 0.4, GP),
    ],
    "abdominal pain": [
        KnowledgeEntry("Gastritis", 0.6, SpecialistType.GASTROENTEROLOGIST),
        KnowledgeEntry("Appendicitis", 0.3, SpecialistType.EMERGENCY),
        KnowledgeEntry("Irritable Bowel Syndrome", 0.5, SpecialistType.GASTROENTEROLOGIST),
    ],
    "joint pain": [
        KnowledgeEntry("Osteoarthritis", 0.6, SpecialistType.ORTHOPEDIST),
        KnowledgeEntry("Rheumatoid Arthritis", 0.4, SpecialistType.ORTHOPEDIST),
        KnowledgeEntry("Gout", 0.3, SpecialistType.ORTHOPEDIST),
    ],
    "fatigue": [
        KnowledgeEntry("Anemia", 0.5, GP),
        KnowledgeEntry("Depression", 0.4, SpecialistType.PSYCHIATRIST),
        KnowledgeEntry("Hypothyroidism", 0.3, SpecialistType.ENDOCRINOLOGIST),
    ],
    "shortness of breath": [
        KnowledgeEntry("Asthma", 0.6, SpecialistType.PULMONOLOGIST),
        KnowledgeEntry("Anxiety", 0.4, SpecialistType.PSYCHIATRIST),
        KnowledgeEntry("Heart Failure", 0.3, SpecialistType.CARDIOLOGIST),
    ],
    "dizziness": [
        KnowledgeEntry("Vertigo", 0.6, SpecialistType.NEUROLOGIST),
        KnowledgeEntry("Low Blood Pressure", 0.4, SpecialistType.CARDIOLOGIST),
        KnowledgeEntry("Anemia", 0.3, GP),
    ],
}


CONDITION_DESCRIPTIONS: Dict[str, str] = {
    "Tension Headache": "A common type of headache characterized by mild to moderate pain that feels like pressure or tightness around the head.",
    "Migraine": "A neurological condition characterized by intense, debilitating headaches, often accompanied by nausea, vomiting, and sensitivity to light and sound.",
    "Sinusitis": "Inflammation of the sinuses, often due to infection, causing pain, pressure, and congestion.",
    "Angina": "Chest pain caused by reduced blood flow to the heart muscles, often described as pressure or tightness in the chest.",
    "Gastroesophageal Reflux": "A condition where stomach acid frequently flows back into the esophagus, causing heartburn and chest pain.",
    "Muscle Strain": "Injury to muscles or tendons from overuse or improper use, causing pain and limited movement.",
    "Viral Infection": "Illness caused by viruses, often resulting in fever, fatigue, and other symptoms depending on the virus.",
    "Bacterial Infection": "Illness caused by bacteria, which may require antibiotics for treatment.",
    "COVID-19": "Infectious disease caused by the SARS-CoV-2 virus, with symptoms ranging from mild to severe.",
    "Contact Dermatitis": "Skin inflammation resulting from direct contact with an irritant or allergen.",
    "Eczema": "Chronic skin condition characterized by itchy, inflamed skin.",
    "Allergic Reaction": "Immune system response to a substance that is normally harmless.",
    "Gastritis": "Inflammation of the stomach lining, often caused by infection or irritation.",
    "Appendicitis": "Inflammation of the appendix, causing severe abdominal pain and requiring immediate medical attention.",
    "Irritable Bowel Syndrome": "A common disorder affecting the large intestine, causing abdominal pain, bloating, and changes in bowel movements.",
    "Osteoarthritis": "Degenerative joint disease where cartilage breaks down, causing pain and stiffness.",
    "Rheumatoid Arthritis": "Autoimmune disorder that causes inflammation in the joints and other body systems.",
    "Gout": "Form of arthritis characterized by sudden, severe attacks of pain, redness, and tenderness in joints.",
    "Anemia": "Condition where you don't have enough healthy red blood cells to carry adequate oxygen to your tissues.",
    "Depression": "Mental health disorder characterized by persistently depressed mood and loss of interest in activities.",
    "Hypothyroidism": "Condition where the thyroid gland doesn't produce enough thyroid hormone.",
    "Asthma": "Chronic condition affecting the airways in the lungs, causing breathing difficulty.",
    "Anxiety": "Feeling of fear, dread, and uneasiness that can be a normal reaction to stress or in some cases, a disorder.",
    "Heart Failure": "Chronic condition where the heart doesn't pump blood as well as it should.",
    "Vertigo": "Sensation of feeling off balance or that you or your surroundings are spinning.",
    "Low Blood Pressure": "Condition where blood pressure is much lower than normal, causing dizziness and fainting.",
}


CONDITION_TESTS: Dict[str, List[str]] = {
    "Tension Headache": ["Physical examination"],
    "Migraine": ["Neurological examination", "MRI scan"],
    "Sinusitis": ["Nasal endoscopy", "Sinus CT scan"],
    "Angina": ["ECG", "Stress test", "Coronary angiography"],
    "Gastroesophageal Reflux": ["Upper endoscopy", "Esophageal pH monitoring"],
    "COVID-19": ["PCR test", "Chest X-ray"],
    "Appendicitis": ["Abdominal ultrasound", "CT scan", "Blood tests"],
    "Vertigo": ["Vestibular testing", "Head MRI"],
    "Hypothyroidism": ["Thyroid function tests", "Anti-thyroid antibody tests"],
    "Heart Failure": ["Echocardiogram", "BNP blood test"],
}


def _specialist(type_: SpecialistType, name: str, description: str,
                icon: str, conditions: List[str]) -> SpecialistInfo:
    return SpecialistInfo(
        type=type_, name=name, description=description,
        icon=icon, conditions=conditions,
    )


# Порядок збігається з SpecialistType
SPECIALIST_DATABASE: Dict[SpecialistType, SpecialistInfo] = {
    info.type: info for info in [
        _specialist(
            GP, "General Practitioner",
            "Provides primary healthcare and coordinates with specialists",
            "User", ["Common cold", "Flu", "Minor infections", "Preventive care"],
        ),
        _specialist(
            SpecialistType.CARDIOLOGIST, "Cardiologist",
            "Specializes in disorders of the heart and cardiovascular system",
            "Heart", ["Heart disease", "Hypertension", "Arrhythmias", "Coronary artery disease"],
        ),
        _specialist(
            SpecialistType.NEUROLOGIST, "Neurologist",
            "Specializes in disorders of the nervous system, including the brain",
            "Brain", ["Migraine", "Epilepsy", "Multiple sclerosis", "Parkinson's disease"],
        ),
        _specialist(
            SpecialistType.GASTROENTEROLOGIST, "Gastroenterologist",
            "Specializes in disorders of the digestive system",
            "Pill", ["Irritable bowel syndrome", "Gastritis", "Hepatitis", "Crohn's disease"],
        ),
        _specialist(
            SpecialistType.DERMATOLOGIST, "Dermatologist",
            "Specializes in disorders of the skin, hair, and nails",
            "Microscope", ["Acne", "Eczema", "Psoriasis", "Skin cancer"],
        ),
        _specialist(
            SpecialistType.ORTHOPEDIST, "Orthopedist",
            "Specializes in disorders of the musculoskeletal system",
            "Bone", ["Arthritis", "Fractures", "Joint pain", "Osteoporosis"],
        ),
        _specialist(
            SpecialistType.PSYCHIATRIST, "Psychiatrist",
            "Specializes in mental health disorders",
            "CircleUser", ["Depression", "Anxiety", "Bipolar disorder", "Schizophrenia"],
        ),
        _specialist(
            SpecialistType.PULMONOLOGIST, "Pulmonologist",
            "Specializes in disorders of the respiratory system",
            "Lungs", ["Asthma", "COPD", "Pneumonia", "Sleep apnea"],
        ),
        _specialist(
            SpecialistType.ENDOCRINOLOGIST, "Endocrinologist",
            "Specializes in disorders of the endocrine system",
            "Activity", ["Diabetes", "Thyroid disorders", "Hormonal imbalances"],
        ),
        _specialist(
            SpecialistType.EMERGENCY, "Emergency Medicine",
            "Provides immediate care for acute illnesses and injuries",
            "AlertTriangle", ["Trauma", "Stroke", "Heart attack", "Severe infections"],
        ),
    ]
}


COMMON_SYMPTOMS: List[str] = [
    "Headache",
    "Fever",
    "Cough",
    "Fatigue",
    "Shortness of breath",
    "Chest pain",
    "Abdominal pain",
    "Rash",
    "Dizziness",
    "Joint pain",
    "Nausea",
    "Back pain",
]


def known_symptoms() -> List[str]:
    """Симптоми, для яких є записи в базі знань"""
    return list(MEDICAL_KNOWLEDGE_BASE.keys())


def get_specialist_info(specialist: SpecialistType) -> SpecialistInfo:
    """Отримати запис довідника (ValueError для невідомого типу)"""
    return SPECIALIST_DATABASE[SpecialistType(specialist)]


def list_specialists() -> List[SpecialistInfo]:
    return list(SPECIALIST_DATABASE.values())
