"""
Static drug catalog.

Illustrative substances only; ids are lower-case and unique.
"""

DRUG_CATALOG = [
    # Anticoagulants & Antiplatelets
    {
        "id": "warfarin",
        "name": "Warfarin",
        "generic_name": "warfarin sodium",
        "brand_name": "Coumadin",
        "description": "Vitamin K antagonist anticoagulant",
        "drug_class": "anticoagulant",
    },
    {
        "id": "aspirin",
        "name": "Aspirin",
        "generic_name": "acetylsalicylic acid",
        "brand_name": "Bayer",
        "description": "Irreversible COX inhibitor used as antiplatelet and analgesic",
        "drug_class": "antiplatelet",
    },
    {
        "id": "clopidogrel",
        "name": "Clopidogrel",
        "generic_name": "clopidogrel bisulfate",
        "brand_name": "Plavix",
        "description": "P2Y12 receptor antagonist",
        "drug_class": "antiplatelet",
    },

    # NSAIDs
    {
        "id": "ibuprofen",
        "name": "Ibuprofen",
        "generic_name": "ibuprofen",
        "brand_name": "Advil",
        "description": "Non-selective NSAID",
        "drug_class": "nsaid",
    },

    # Cardiovascular
    {
        "id": "lisinopril",
        "name": "Lisinopril",
        "generic_name": "lisinopril",
        "brand_name": "Zestril",
        "description": "ACE inhibitor",
        "drug_class": "ace_inhibitor",
        "renally_cleared": True,
    },
    {
        "id": "metoprolol",
        "name": "Metoprolol",
        "generic_name": "metoprolol tartrate",
        "brand_name": "Lopressor",
        "description": "Cardioselective beta-1 blocker",
        "drug_class": "beta_blocker",
    },
    {
        "id": "amlodipine",
        "name": "Amlodipine",
        "generic_name": "amlodipine besylate",
        "brand_name": "Norvasc",
        "description": "Dihydropyridine calcium channel blocker",
        "drug_class": "calcium_channel_blocker",
    },
    {
        "id": "amiodarone",
        "name": "Amiodarone",
        "generic_name": "amiodarone hydrochloride",
        "brand_name": "Pacerone",
        "description": "Class III antiarrhythmic; potent CYP2C9/CYP3A4 inhibitor",
        "drug_class": "antiarrhythmic",
    },
    {
        "id": "digoxin",
        "name": "Digoxin",
        "generic_name": "digoxin",
        "brand_name": "Lanoxin",
        "description": "Cardiac glycoside",
        "drug_class": "antiarrhythmic",
        "renally_cleared": True,
    },

    # Statins
    {
        "id": "simvastatin",
        "name": "Simvastatin",
        "generic_name": "simvastatin",
        "brand_name": "Zocor",
        "description": "HMG-CoA reductase inhibitor metabolised by CYP3A4",
        "drug_class": "statin",
    },

    # Diabetes
    {
        "id": "metformin",
        "name": "Metformin",
        "generic_name": "metformin hydrochloride",
        "brand_name": "Glucophage",
        "description": "Biguanide antidiabetic",
        "drug_class": "biguanide",
        "renally_cleared": True,
    },

    # Thyroid
    {
        "id": "levothyroxine",
        "name": "Levothyroxine",
        "generic_name": "levothyroxine sodium",
        "brand_name": "Synthroid",
        "description": "Synthetic T4 thyroid hormone",
        "drug_class": "thyroid_hormone",
    },

    # PPIs
    {
        "id": "omeprazole",
        "name": "Omeprazole",
        "generic_name": "omeprazole",
        "brand_name": "Prilosec",
        "description": "Proton pump inhibitor; CYP2C19 inhibitor",
        "drug_class": "ppi",
    },

    # CNS
    {
        "id": "sertraline",
        "name": "Sertraline",
        "generic_name": "sertraline hydrochloride",
        "brand_name": "Zoloft",
        "description": "Selective serotonin reuptake inhibitor",
        "drug_class": "ssri",
    },
    {
        "id": "tramadol",
        "name": "Tramadol",
        "generic_name": "tramadol hydrochloride",
        "brand_name": "Ultram",
        "description": "Weak mu-opioid agonist with serotonergic activity",
        "drug_class": "opioid",
    },
]
