"""
Static interaction knowledge base.

Storage is directional ({first_id: {second_id: record}}) and each pair is
stored once; lookups query both orders.
"""

_HOLBROOK_2005 = {
    "title": "Systematic overview of warfarin and its drug and food interactions",
    "authors": "Holbrook AM, Pereira JA, Labiris R, et al.",
    "journal": "Archives of Internal Medicine",
    "year": 2005,
}

_BOYER_2005 = {
    "title": "The serotonin syndrome",
    "authors": "Boyer EW, Shannon M",
    "journal": "New England Journal of Medicine",
    "year": 2005,
}

_FDA_SIMVASTATIN_2011 = {
    "organization": "FDA",
    "warning": "New restrictions, contraindications, and dose limitations for Zocor (simvastatin) to reduce the risk of muscle injury",
    "date": "2011-06-08",
}

INTERACTION_DATA = {
    "warfarin": {
        "aspirin": {
            "risk_level": "high",
            "compatibility_status": "incompatible",
            "time_to_onset": "short-term",
            "confidence_score": 5,
            "mechanism": "Aspirin inhibits platelet aggregation and damages gastric mucosa while warfarin depletes vitamin K-dependent clotting factors, giving additive bleeding risk.",
            "effects": [
                "Increased risk of major bleeding",
                "Gastrointestinal haemorrhage",
                "Intracranial haemorrhage",
            ],
            "dose_modification": "Avoid unless specifically indicated; if combined, use aspirin 75-100 mg daily with gastroprotection.",
            "monitoring_parameters": ["INR", "Haemoglobin", "Signs of bleeding"],
            "alternatives": ["Acetaminophen for analgesia"],
            "evidence": {
                "literature_citations": [_HOLBROOK_2005],
                "guidelines": [
                    {
                        "organization": "ACCP",
                        "recommendation": "Avoid concomitant antiplatelet therapy in anticoagulated patients without a specific indication.",
                        "year": 2012,
                    }
                ],
            },
        },
        "amiodarone": {
            "risk_level": "high",
            "compatibility_status": "incompatible",
            "time_to_onset": "delayed",
            "confidence_score": 5,
            "mechanism": "Amiodarone inhibits CYP2C9 and CYP3A4, reducing warfarin clearance; the effect builds over weeks because of amiodarone's long half-life.",
            "effects": ["Elevated INR", "Increased bleeding risk"],
            "dose_modification": "Reduce warfarin dose by 30-50% when starting amiodarone.",
            "monitoring_parameters": ["INR weekly for the first 6-8 weeks"],
            "alternatives": ["Dose-adjusted warfarin with close INR follow-up"],
            "evidence": {
                "literature_citations": [_HOLBROOK_2005],
            },
        },
        "simvastatin": {
            "risk_level": "low",
            "compatibility_status": "compatible",
            "time_to_onset": "delayed",
            "confidence_score": 3,
            "mechanism": "Simvastatin may modestly potentiate the anticoagulant effect of warfarin through competition for hepatic metabolism.",
            "effects": ["Small INR increase"],
            "monitoring_parameters": ["INR after starting or changing statin dose"],
            "evidence": {
                "literature_citations": [_HOLBROOK_2005],
            },
        },
        "ibuprofen": {
            "risk_level": "high",
            "compatibility_status": "incompatible",
            "time_to_onset": "short-term",
            "confidence_score": 4,
            "mechanism": "NSAIDs inhibit platelet function and injure gastric mucosa, adding to warfarin's anticoagulant effect.",
            "effects": ["Gastrointestinal bleeding", "Unpredictable INR elevation"],
            "monitoring_parameters": ["INR", "Signs of bleeding"],
            "alternatives": ["Acetaminophen"],
            "evidence": {
                "literature_citations": [_HOLBROOK_2005],
            },
        },
    },
    "aspirin": {
        "ibuprofen": {
            "risk_level": "moderate",
            "compatibility_status": "compatible",
            "time_to_onset": "immediate",
            "confidence_score": 4,
            "mechanism": "Ibuprofen competitively blocks aspirin's access to platelet COX-1, reducing its irreversible antiplatelet effect.",
            "effects": ["Reduced cardioprotection from aspirin", "Increased GI irritation"],
            "dose_modification": "Take immediate-release aspirin at least 30 minutes before ibuprofen.",
            "monitoring_parameters": ["GI symptoms"],
            "evidence": {
                "regulatory_warnings": [
                    {
                        "organization": "FDA",
                        "warning": "Concomitant use of ibuprofen and aspirin may interfere with aspirin's cardioprotective effect",
                        "date": "2006-09-08",
                    }
                ],
            },
        },
        "clopidogrel": {
            "risk_level": "moderate",
            "compatibility_status": "compatible",
            "time_to_onset": "short-term",
            "confidence_score": 4,
            "mechanism": "Dual antiplatelet therapy combines COX-1 and P2Y12 inhibition, increasing bleeding tendency.",
            "effects": ["Increased bleeding risk"],
            "monitoring_parameters": ["Signs of bleeding", "Haemoglobin"],
            "evidence": {
                "guidelines": [
                    {
                        "organization": "ACC/AHA",
                        "recommendation": "Dual antiplatelet therapy is indicated after ACS or stenting for a defined duration.",
                        "year": 2016,
                    }
                ],
            },
        },
    },
    "amiodarone": {
        "simvastatin": {
            "risk_level": "high",
            "compatibility_status": "incompatible",
            "time_to_onset": "delayed",
            "confidence_score": 5,
            "mechanism": "Amiodarone inhibits CYP3A4, raising simvastatin exposure.",
            "effects": ["Myopathy", "Rhabdomyolysis"],
            "dose_modification": "Do not exceed simvastatin 20 mg daily.",
            "monitoring_parameters": ["Muscle pain or weakness", "Creatine kinase if symptomatic"],
            "alternatives": ["Pravastatin", "Rosuvastatin"],
            "evidence": {
                "regulatory_warnings": [_FDA_SIMVASTATIN_2011],
            },
        },
        "digoxin": {
            "risk_level": "high",
            "compatibility_status": "incompatible",
            "time_to_onset": "short-term",
            "confidence_score": 5,
            "mechanism": "Amiodarone inhibits P-glycoprotein, reducing renal and non-renal digoxin clearance.",
            "effects": ["Digoxin toxicity", "Bradycardia", "Heart block"],
            "dose_modification": "Reduce digoxin dose by 50% when starting amiodarone.",
            "monitoring_parameters": ["Serum digoxin level", "Heart rate", "ECG"],
        },
        "metoprolol": {
            "risk_level": "moderate",
            "compatibility_status": "compatible",
            "time_to_onset": "short-term",
            "confidence_score": 3,
            "mechanism": "Additive negative chronotropic and dromotropic effects; amiodarone also inhibits CYP2D6.",
            "effects": ["Bradycardia", "AV block", "Hypotension"],
            "monitoring_parameters": ["Heart rate", "Blood pressure", "ECG"],
        },
    },
    "ibuprofen": {
        "lisinopril": {
            "risk_level": "moderate",
            "compatibility_status": "compatible",
            "time_to_onset": "short-term",
            "confidence_score": 4,
            "mechanism": "NSAIDs reduce renal prostaglandin synthesis, blunting the antihypertensive effect of ACE inhibitors and impairing renal perfusion.",
            "effects": ["Reduced blood pressure control", "Acute kidney injury", "Hyperkalaemia"],
            "monitoring_parameters": ["Blood pressure", "Serum creatinine", "Potassium"],
            "alternatives": ["Acetaminophen"],
        },
    },
    "lisinopril": {
        "metformin": {
            "risk_level": "low",
            "compatibility_status": "compatible",
            "time_to_onset": "delayed",
            "confidence_score": 2,
            "mechanism": "ACE inhibitors may enhance insulin sensitivity, slightly increasing the glucose-lowering effect of metformin.",
            "effects": ["Hypoglycaemia (rare)"],
            "monitoring_parameters": ["Blood glucose"],
        },
    },
    "simvastatin": {
        "amlodipine": {
            "risk_level": "moderate",
            "compatibility_status": "compatible",
            "time_to_onset": "delayed",
            "confidence_score": 4,
            "mechanism": "Amlodipine weakly inhibits CYP3A4, increasing simvastatin exposure.",
            "effects": ["Increased risk of myopathy"],
            "dose_modification": "Limit simvastatin to 20 mg daily.",
            "monitoring_parameters": ["Muscle pain or weakness"],
            "alternatives": ["Atorvastatin", "Rosuvastatin"],
            "evidence": {
                "regulatory_warnings": [_FDA_SIMVASTATIN_2011],
            },
        },
    },
    "levothyroxine": {
        "amlodipine": {
            "risk_level": "low",
            "compatibility_status": "compatible",
            "time_to_onset": "delayed",
            "confidence_score": 2,
            "mechanism": "Thyroid hormone replacement changes cardiovascular demand and may alter blood pressure response.",
            "effects": ["Altered blood pressure control"],
            "monitoring_parameters": ["Blood pressure", "TSH"],
        },
    },
    "omeprazole": {
        "clopidogrel": {
            "risk_level": "moderate",
            "compatibility_status": "incompatible",
            "time_to_onset": "short-term",
            "confidence_score": 4,
            "mechanism": "Omeprazole inhibits CYP2C19, reducing conversion of clopidogrel to its active metabolite.",
            "effects": ["Reduced antiplatelet effect", "Increased cardiovascular event risk"],
            "alternatives": ["Pantoprazole", "Famotidine"],
            "evidence": {
                "regulatory_warnings": [
                    {
                        "organization": "FDA",
                        "warning": "Avoid concomitant use of Plavix (clopidogrel) with omeprazole",
                        "date": "2009-11-17",
                    }
                ],
            },
        },
        "metoprolol": {
            "risk_level": "low",
            "compatibility_status": "compatible",
            "time_to_onset": "delayed",
            "confidence_score": 2,
            "mechanism": "Minor changes in gastric pH may alter absorption of extended-release formulations.",
            "effects": ["Slight change in beta-blocker exposure"],
            "monitoring_parameters": ["Heart rate"],
        },
    },
    "sertraline": {
        "tramadol": {
            "risk_level": "high",
            "compatibility_status": "incompatible",
            "time_to_onset": "immediate",
            "confidence_score": 4,
            "mechanism": "Both drugs increase synaptic serotonin; sertraline also inhibits CYP2D6 activation of tramadol.",
            "effects": ["Serotonin syndrome", "Seizures", "Reduced analgesia"],
            "monitoring_parameters": ["Mental status", "Neuromuscular signs", "Temperature"],
            "alternatives": ["Acetaminophen", "Non-serotonergic opioid"],
            "evidence": {
                "literature_citations": [_BOYER_2005],
            },
        },
    },
}
