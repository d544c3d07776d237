"""Application constants."""

# Workout builder limits
MAX_EXERCISES_PER_WORKOUT = 20
MAX_SETS_PER_EXERCISE = 10

# Standard muscle groups seeded into a fresh database: (name, body, description)
DEFAULT_MUSCLE_GROUPS = [
    # Upper body, anterior
    ("Pectoralis Major", "UPPER", "Primary chest muscle responsible for arm adduction, flexion, and internal rotation"),
    ("Pectoralis Minor", "UPPER", "Deep chest muscle that aids in shoulder protraction and depression"),
    ("Anterior Deltoid", "UPPER", "Front shoulder muscle responsible for arm flexion and internal rotation"),
    ("Biceps Brachii", "UPPER", "Upper arm muscle that flexes the elbow and supinates the forearm"),
    # Upper body, posterior
    ("Latissimus Dorsi", "UPPER", "Large back muscle responsible for arm extension, adduction, and internal rotation"),
    ("Trapezius", "UPPER", "Upper back muscle that moves the shoulder blade and supports the arm"),
    ("Posterior Deltoid", "UPPER", "Rear shoulder muscle responsible for arm extension and external rotation"),
    ("Triceps Brachii", "UPPER", "Upper arm muscle that extends the elbow"),
    ("Rhomboids", "UPPER", "Upper back muscles that retract the shoulder blades"),
    # Core
    ("Rectus Abdominis", "CORE", "Front abdominal muscle responsible for trunk flexion"),
    ("Obliques", "CORE", "Side abdominal muscles responsible for rotation and lateral flexion"),
    ("Transverse Abdominis", "CORE", "Deep core muscle that stabilizes the spine and compresses the abdomen"),
    ("Erector Spinae", "CORE", "Back muscles responsible for spine extension and posture"),
    # Lower body, anterior
    ("Quadriceps", "LOWER", "Front thigh muscles responsible for knee extension and hip flexion"),
    ("Hip Flexors", "LOWER", "Muscle group that flexes the hip and stabilizes the spine"),
    ("Tibialis Anterior", "LOWER", "Front shin muscle responsible for dorsiflexion of the foot"),
    # Lower body, posterior
    ("Gluteus Maximus", "LOWER", "Large hip muscle responsible for hip extension and external rotation"),
    ("Hamstrings", "LOWER", "Rear thigh muscles responsible for knee flexion and hip extension"),
    ("Gastrocnemius", "LOWER", "Main calf muscle responsible for plantar flexion of the foot"),
    ("Soleus", "LOWER", "Deep calf muscle responsible for plantar flexion of the foot"),
]
