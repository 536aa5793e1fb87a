# Canned answers for the assessment assistant. Answers that depend on the
# user's result are built in responder.py.

SYMPTOMS_BEYOND_PAIN = """Yes, endometriosis can cause many symptoms beyond pelvic pain:

Common symptoms:
- Chronic pelvic pain and severe period cramps
- Pain during or after sex (dyspareunia)
- Back pain and leg pain (nerve involvement)
- Chronic fatigue (from inflammation and pain)
- Bloating and digestive issues
- Painful bowel movements or urination during periods
- Heavy bleeding or spotting
- Infertility or difficulty conceiving

Important: Symptoms vary widely between individuals. Track your patterns and discuss all symptoms with your doctor."""

SYMPTOMS_FLUCTUATE = """Yes, symptoms often fluctuate throughout your cycle and over time.

Common patterns:
- Symptoms typically worse during or around menstruation
- Pain may peak mid-cycle (ovulation) or just before period
- Some months are worse than others
- Stress, diet, and inflammation levels affect symptoms

Helpful action: Track your symptoms with a diary or app to identify patterns and triggers. This information is valuable for your doctor."""

CHRONIC_PAIN = """Pain continuing after your period can indicate endometriosis involvement.

Why this happens:
- Endometrial-like tissue outside the uterus responds to hormones
- Inflammation persists even after bleeding stops
- Adhesions and scar tissue cause ongoing pain
- Nerve sensitization creates chronic pain cycles

Management:
- NSAIDs and pain management strategies
- Hormonal treatments to suppress endometriosis activity
- Pelvic floor physical therapy
- Discuss persistent pain with your gynecologist for treatment options"""

WHICH_DOCTOR = """Recommended healthcare providers for endometriosis:

1. Gynecologist (First step)
- Can diagnose and manage most cases, prescribe medications and order imaging

2. Endometriosis Specialist
- Gynecologists with advanced training in endometriosis and excision surgery

3. Reproductive Endocrinologist
- If fertility is a concern

4. Additional support:
- Pelvic floor physical therapist, pain management specialist, colorectal surgeon (bowel involvement)

Finding a specialist: Look for endometriosis centers or ask for referrals from your primary care doctor."""

DIAGNOSIS_PROCESS = """Endometriosis diagnosis typically involves:

1. Clinical Evaluation
- Detailed symptom history and pelvic exam

2. Imaging Studies
- Transvaginal ultrasound: Detects ovarian endometriomas (cysts)
- MRI: Better visualization of deep infiltrating endometriosis

3. Laparoscopy (Definitive diagnosis)
- Minimally invasive surgery with camera, considered the gold standard

4. Blood Tests (Supportive, not diagnostic)
- CA-125 may be elevated but is not specific

Important: Many doctors start treatment based on symptoms without requiring surgery."""

IMAGING_OR_SURGERY = """The approach depends on your symptoms and goals:

Start with imaging (Ultrasound/MRI):
- Non-invasive and often helpful; a good first step before considering surgery

Consider laparoscopy if:
- Imaging is inconclusive but symptoms are severe
- Pain is unmanaged by medications
- Fertility is a concern and other causes are ruled out

Discuss with your gynecologist: They'll recommend the best approach based on your situation, symptom severity, and reproductive goals."""

NATURAL_PAIN_MANAGEMENT = """Natural pain management strategies for endometriosis:

1. Heat therapy (heating pads, warm baths)
2. Pelvic floor physical therapy
3. Gentle exercise: yoga, walking, swimming
4. Stress management: meditation, mindfulness, deep breathing
5. TENS units
6. Supplements such as omega-3s or magnesium (consult your doctor first)

Important: Natural methods work best alongside medical treatment, not as replacement."""

DIET = """Diet guidelines for endometriosis:

Foods that may help (anti-inflammatory):
- Fruits and vegetables, omega-3 rich foods, whole grains, legumes, olive oil

Foods to limit (may increase inflammation):
- Red and processed meats, refined sugars, trans fats, alcohol, excessive caffeine

Note: Diet alone won't cure endometriosis, but it may help reduce inflammation and improve symptoms."""

EXERCISE = """Yes, exercise and yoga can help manage endometriosis symptoms!

Benefits of exercise:
- Reduces inflammation and releases endorphins
- Improves mood and reduces stress

Best types: yoga, low-impact cardio (walking, swimming, cycling), pilates.

Tips: Listen to your body, rest during flares, and build up gradually."""

STRESS = """Stress significantly impacts endometriosis symptoms:

- Increases inflammation and lowers pain threshold
- Causes muscle tension in the pelvis
- Pain causes stress, and stress worsens pain perception

Strategies: relaxation techniques, good sleep, gentle exercise, therapy or support groups.

Important: Managing stress is a key part of comprehensive endometriosis treatment."""

HEAT_AND_REST = """Yes! Heat therapy and rest are very effective for endometriosis pain.

- Heat relaxes pelvic muscles and reduces cramping
- Use heating pads for 20-30 minutes at a time and avoid falling asleep with one
- During flares, rest is essential: pace your activities

Remember: Chronic pain is exhausting. Rest is part of treatment, not avoidance."""

SYMPTOMS_GENERAL = (
    "Endometriosis symptoms can include pelvic pain, painful periods, pain during intercourse, "
    "heavy menstrual bleeding, and fertility issues. The severity and combination of symptoms vary "
    "greatly between individuals. If you're experiencing concerning symptoms, please consult a "
    "healthcare provider."
)

TREATMENT_GENERAL = (
    "While there's no cure for endometriosis, treatments include pain medication, hormone therapy, "
    "and in some cases, surgery. Treatment plans are individualized based on symptoms, severity, and "
    "whether you're trying to conceive. A gynecologist specializing in endometriosis can help "
    "determine the best approach for your situation."
)

WHAT_IS_ENDOMETRIOSIS = (
    "Endometriosis is a condition where tissue similar to the uterine lining grows outside the uterus, "
    "commonly on ovaries, fallopian tubes, and pelvic tissues. This can cause pain, inflammation, and "
    "fertility issues. It affects approximately 10% of women of reproductive age."
)

DEFAULT_REPLY = (
    "I can help you understand your assessment results, explain endometriosis risk factors, discuss "
    "symptoms, and provide information about next steps. What would you like to know more about?"
)
