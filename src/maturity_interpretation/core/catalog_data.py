"""Literal catalog definitions for the digital maturity model.

Five maturity functions, their themes, five global levels per function and
three thematic levels per theme. This module only declares data; the
immutable catalog is assembled by ``core.catalog.build_catalog``.

Functions:
    devsecops            — DevSecOps practices (curated thematic texts)
    cybersecurite        — cybersecurity practices and processes
    modele_operationnel  — IT operating model effectiveness
    gouvernance_si       — information-system governance
    acculturation_data   — data exploitation and valorisation

Global bands (inclusive, first match wins):
    [0.0, 1.5] Niveau 1 - Initial
    [1.5, 2.5] Niveau 2 - Défini
    [2.5, 3.5] Niveau 3 - Mesuré
    [3.5, 4.5] Niveau 4 - Géré
    [4.5, 5.0] Niveau 5 - Optimisé

Thematic bands:
    [0.0, 1.5] Faible / [1.5, 3.5] Intermédiaire / [3.5, 5.0] Avancé
"""

from maturity_interpretation.core.models.catalog import (
    ADVANCED_THRESHOLD,
    INTERMEDIATE_THRESHOLD,
    ScoreRange,
    Theme,
)

SCORE_DOMAIN_MIN: float = 0.0
SCORE_DOMAIN_MAX: float = 5.0


# ---------------------------------------------------------------------------
# Functions
# ---------------------------------------------------------------------------

# (id, name, description, display_order)
FUNCTION_DEFINITIONS: tuple[tuple[str, str, str, int], ...] = (
    (
        "devsecops",
        "DevSecOps",
        "Évaluation de la maturité des pratiques DevSecOps",
        1,
    ),
    (
        "cybersecurite",
        "Cybersécurité",
        "Évaluation des pratiques et processus de cybersécurité",
        2,
    ),
    (
        "modele_operationnel",
        "Modèle Opérationnel",
        "Évaluation de l'efficacité du modèle opérationnel IT",
        3,
    ),
    (
        "gouvernance_si",
        "Gouvernance SI",
        "Évaluation des pratiques de gouvernance du système d'information",
        4,
    ),
    (
        "acculturation_data",
        "Acculturation Data",
        "Évaluation de la maturité dans l'exploitation et la valorisation des données",
        5,
    ),
)

# Alternate spellings -> canonical function id. Keys are normalised when the
# catalog is built, so accented and spaced variants are all reachable.
FUNCTION_ALIASES: dict[str, str] = {
    # Cybersécurité
    "cybersecurite": "cybersecurite",
    "cybersécurité": "cybersecurite",
    "cyber_securite": "cybersecurite",
    "cyber": "cybersecurite",
    # DevSecOps
    "devsecops": "devsecops",
    "dev_sec_ops": "devsecops",
    "dev-sec-ops": "devsecops",
    # Modèle Opérationnel
    "modele_operationnel": "modele_operationnel",
    "modèle_opérationnel": "modele_operationnel",
    "modele operationnel": "modele_operationnel",
    "modèle opérationnel": "modele_operationnel",
    "model_operationnel": "modele_operationnel",
    # Gouvernance SI
    "gouvernance_si": "gouvernance_si",
    "gouvernance si": "gouvernance_si",
    "gouvernance": "gouvernance_si",
    "gov_si": "gouvernance_si",
    # Acculturation Data
    "acculturation_data": "acculturation_data",
    "acculturation data": "acculturation_data",
    "data": "acculturation_data",
    "acculturation": "acculturation_data",
}


# ---------------------------------------------------------------------------
# Themes
# ---------------------------------------------------------------------------

THEMES: tuple[Theme, ...] = (
    # -----------------------------------------------------------------------
    # devsecops (9 themes)
    # -----------------------------------------------------------------------
    Theme(
        id="devsecops_culture",
        function_id="devsecops",
        name="Culture & Collaboration",
        description="Évaluation de la culture collaborative autour de la sécurité",
        question_count=5,
    ),
    Theme(
        id="devsecops_operations",
        function_id="devsecops",
        name="Opérations & CI/CD",
        description="Évaluation des pratiques opérationnelles et d'intégration continue",
        question_count=8,
    ),
    Theme(
        id="devsecops_vulnerabilities",
        function_id="devsecops",
        name="Gestion des vulnérabilités & Sûreté du code",
        description="Évaluation des pratiques de détection et correction des vulnérabilités",
        question_count=6,
    ),
    Theme(
        id="devsecops_access",
        function_id="devsecops",
        name="Gestion des accès & secrets",
        description="Évaluation des pratiques de gestion des accès sécurisés",
        question_count=5,
    ),
    Theme(
        id="devsecops_observability",
        function_id="devsecops",
        name="Observabilité & Monitoring",
        description="Évaluation des capacités de surveillance et détection",
        question_count=5,
    ),
    Theme(
        id="devsecops_compliance",
        function_id="devsecops",
        name="Conformité & Gouvernance",
        description="Évaluation de la conformité et des processus de gouvernance",
        question_count=5,
    ),
    Theme(
        id="devsecops_training",
        function_id="devsecops",
        name="Formation & Sensibilisation",
        description="Évaluation des pratiques de formation à la sécurité",
        question_count=5,
    ),
    Theme(
        id="devsecops_satisfaction",
        function_id="devsecops",
        name="Satisfaction Client & Time-to-Market",
        description=(
            "Évaluation de l'impact sur la satisfaction client et le délai "
            "de mise sur le marché"
        ),
        question_count=6,
    ),
    Theme(
        id="devsecops_industrialization",
        function_id="devsecops",
        name="Industrialisation & Standardisation",
        description="Évaluation des pratiques de standardisation et d'industrialisation",
        question_count=5,
    ),
    # -----------------------------------------------------------------------
    # cybersecurite (8 themes)
    # -----------------------------------------------------------------------
    Theme(
        id="cyber_governance",
        function_id="cybersecurite",
        name="Gouvernance de Sécurité",
        description="Évaluation des politiques et de la gouvernance de sécurité",
        question_count=6,
    ),
    Theme(
        id="cyber_risk",
        function_id="cybersecurite",
        name="Gestion des Risques",
        description="Évaluation des processus d'identification et de gestion des risques",
        question_count=5,
    ),
    Theme(
        id="cyber_identity",
        function_id="cybersecurite",
        name="Gestion des Identités",
        description="Évaluation des pratiques de gestion des identités et des accès",
        question_count=7,
    ),
    Theme(
        id="cyber_protection",
        function_id="cybersecurite",
        name="Protection des Données",
        description="Évaluation des mesures de protection des données sensibles",
        question_count=6,
    ),
    Theme(
        id="cyber_detection",
        function_id="cybersecurite",
        name="Détection & Réponse",
        description="Évaluation des capacités de détection et de réponse aux incidents",
        question_count=8,
    ),
    Theme(
        id="cyber_resilience",
        function_id="cybersecurite",
        name="Résilience & Continuité",
        description="Évaluation de la résilience et des plans de continuité",
        question_count=5,
    ),
    Theme(
        id="cyber_supply",
        function_id="cybersecurite",
        name="Chaîne d'Approvisionnement",
        description="Évaluation de la sécurité de la chaîne d'approvisionnement",
        question_count=5,
    ),
    Theme(
        id="cyber_awareness",
        function_id="cybersecurite",
        name="Culture & Sensibilisation",
        description=(
            "Évaluation de la culture de sécurité et des programmes de sensibilisation"
        ),
        question_count=5,
    ),
    # -----------------------------------------------------------------------
    # modele_operationnel (7 themes)
    # -----------------------------------------------------------------------
    Theme(
        id="ops_structure",
        function_id="modele_operationnel",
        name="Structure Organisationnelle",
        description="Évaluation de l'efficacité de la structure organisationnelle IT",
        question_count=5,
    ),
    Theme(
        id="ops_processes",
        function_id="modele_operationnel",
        name="Processus & Méthodes",
        description="Évaluation de la maturité des processus et méthodes de travail",
        question_count=7,
    ),
    Theme(
        id="ops_service",
        function_id="modele_operationnel",
        name="Gestion des Services",
        description="Évaluation des pratiques de gestion des services IT",
        question_count=6,
    ),
    Theme(
        id="ops_performance",
        function_id="modele_operationnel",
        name="Performance & Mesure",
        description=(
            "Évaluation des mécanismes de mesure et d'amélioration de la performance"
        ),
        question_count=5,
    ),
    Theme(
        id="ops_sourcing",
        function_id="modele_operationnel",
        name="Stratégie de Sourcing",
        description=(
            "Évaluation de la stratégie d'approvisionnement et de gestion des fournisseurs"
        ),
        question_count=5,
    ),
    Theme(
        id="ops_transformation",
        function_id="modele_operationnel",
        name="Transformation & Agilité",
        description="Évaluation de la capacité à s'adapter et se transformer",
        question_count=6,
    ),
    Theme(
        id="ops_automation",
        function_id="modele_operationnel",
        name="Automatisation & Efficacité",
        description=(
            "Évaluation du niveau d'automatisation et d'efficacité opérationnelle"
        ),
        question_count=6,
    ),
    # -----------------------------------------------------------------------
    # gouvernance_si (7 themes)
    # -----------------------------------------------------------------------
    Theme(
        id="gouv_alignment",
        function_id="gouvernance_si",
        name="Alignement Stratégique",
        description="Évaluation de l'alignement du SI avec la stratégie d'entreprise",
        question_count=5,
    ),
    Theme(
        id="gouv_portfolio",
        function_id="gouvernance_si",
        name="Gestion de Portefeuille",
        description=(
            "Évaluation des pratiques de gestion du portefeuille de projets et d'applications"
        ),
        question_count=6,
    ),
    Theme(
        id="gouv_architecture",
        function_id="gouvernance_si",
        name="Architecture d'Entreprise",
        description="Évaluation de la maturité de l'architecture d'entreprise",
        question_count=7,
    ),
    Theme(
        id="gouv_investment",
        function_id="gouvernance_si",
        name="Investissements & Valeur",
        description=(
            "Évaluation de la gestion des investissements et de la création de valeur"
        ),
        question_count=5,
    ),
    Theme(
        id="gouv_risks",
        function_id="gouvernance_si",
        name="Gestion des Risques SI",
        description="Évaluation des pratiques de gestion des risques liés au SI",
        question_count=6,
    ),
    Theme(
        id="gouv_compliance",
        function_id="gouvernance_si",
        name="Conformité & Régulation",
        description="Évaluation de la conformité aux réglementations et standards",
        question_count=5,
    ),
    Theme(
        id="gouv_performance",
        function_id="gouvernance_si",
        name="Performance & Mesure",
        description=(
            "Évaluation des processus de mesure et de pilotage de la performance"
        ),
        question_count=5,
    ),
    # -----------------------------------------------------------------------
    # acculturation_data (8 themes)
    # -----------------------------------------------------------------------
    Theme(
        id="data_strategy",
        function_id="acculturation_data",
        name="Stratégie Data",
        description="Évaluation de la vision et stratégie de valorisation des données",
        question_count=5,
    ),
    Theme(
        id="data_governance",
        function_id="acculturation_data",
        name="Gouvernance des Données",
        description=(
            "Évaluation des pratiques de gouvernance et de qualité des données"
        ),
        question_count=7,
    ),
    Theme(
        id="data_architecture",
        function_id="acculturation_data",
        name="Architecture Data",
        description=(
            "Évaluation de l'architecture de données et des plateformes analytiques"
        ),
        question_count=6,
    ),
    Theme(
        id="data_skills",
        function_id="acculturation_data",
        name="Compétences & Culture",
        description="Évaluation des compétences data et de la culture data-driven",
        question_count=6,
    ),
    Theme(
        id="data_analytics",
        function_id="acculturation_data",
        name="Analytique & BI",
        description="Évaluation de la maturité en analytique et business intelligence",
        question_count=7,
    ),
    Theme(
        id="data_ai",
        function_id="acculturation_data",
        name="IA & Advanced Analytics",
        description="Évaluation de l'utilisation de l'IA et des analyses avancées",
        question_count=5,
    ),
    Theme(
        id="data_ethics",
        function_id="acculturation_data",
        name="Éthique & Responsabilité",
        description=(
            "Évaluation des pratiques éthiques et responsables de l'utilisation des données"
        ),
        question_count=5,
    ),
    Theme(
        id="data_monetization",
        function_id="acculturation_data",
        name="Monétisation & Valeur",
        description="Évaluation des capacités à valoriser et monétiser les données",
        question_count=5,
    ),
)


# ---------------------------------------------------------------------------
# Global levels
# ---------------------------------------------------------------------------

GLOBAL_BANDS: tuple[ScoreRange, ...] = (
    ScoreRange(0.0, 1.5),
    ScoreRange(1.5, 2.5),
    ScoreRange(2.5, 3.5),
    ScoreRange(3.5, 4.5),
    ScoreRange(4.5, 5.0),
)

GLOBAL_LEVEL_LABELS: tuple[str, ...] = (
    "Niveau 1 - Initial",
    "Niveau 2 - Défini",
    "Niveau 3 - Mesuré",
    "Niveau 4 - Géré",
    "Niveau 5 - Optimisé",
)

# Level ids are "{prefix}_n{1..5}".
GLOBAL_LEVEL_ID_PREFIXES: dict[str, str] = {
    "devsecops": "devsecops",
    "cybersecurite": "cyber",
    "modele_operationnel": "ops",
    "gouvernance_si": "gouv",
    "acculturation_data": "data",
}

# function id -> five (description, recommendations) pairs, lowest band first
GLOBAL_LEVEL_TEXTS: dict[str, tuple[tuple[str, str], ...]] = {
    "devsecops": (
        (
            "La démarche DevSecOps est embryonnaire. Les pratiques de sécurité sont "
            "réactives et souvent perçues comme un frein à la livraison.",
            "Priorité à la sensibilisation et à la formation des équipes. Établir les "
            "fondations avec une automatisation progressive et des quick-wins visibles.",
        ),
        (
            "Des processus formalisés sont en place mais leur application reste inégale. "
            "La sécurité est prise en compte mais tardivement dans le cycle.",
            "Renforcer l'intégration de la sécurité dans les pipelines, développer le "
            "partage de connaissance entre équipes et standardiser les pratiques.",
        ),
        (
            "Les pratiques DevSecOps sont largement adoptées et mesurées. La sécurité est "
            "intégrée mais peut encore créer des frictions.",
            "Automatiser davantage les contrôles, améliorer l'observabilité et renforcer "
            "la culture d'amélioration continue basée sur les métriques.",
        ),
        (
            "L'organisation dispose d'une approche mature avec automatisation avancée et "
            "intégration profonde de la sécurité dans les processus.",
            "Perfectionner l'orchestration des outils, développer des mécanismes "
            "prédictifs et partager les bonnes pratiques à l'échelle de l'organisation.",
        ),
        (
            "Excellence opérationnelle avec une sécurité parfaitement intégrée, "
            "automatisée et adaptative. La culture de responsabilité partagée est établie.",
            "Maintenir l'excellence par l'innovation continue, le mentoring externe et le "
            "développement de frameworks propriétaires. Contribuer à l'écosystème DevSecOps.",
        ),
    ),
    "cybersecurite": (
        (
            "Approche réactive de la cybersécurité. Peu de contrôles formalisés. Réponse "
            "principalement après incidents.",
            "Établir un cadre de gouvernance basique. Identifier et protéger les actifs "
            "critiques. Former les équipes aux fondamentaux de la sécurité.",
        ),
        (
            "Contrôles de sécurité documentés mais application inégale. Processus définis "
            "mais avec des gaps. Approche encore largement réactive.",
            "Formaliser une politique de sécurité complète. Mettre en place une gestion "
            "des vulnérabilités. Améliorer la sensibilisation à tous les niveaux.",
        ),
        (
            "Contrôles de sécurité largement implémentés et surveillés. Processus "
            "cohérents. Début d'approche proactive.",
            "Améliorer la détection et la réponse aux incidents. Implémenter une gestion "
            "des risques plus formelle. Renforcer les tests de sécurité.",
        ),
        (
            "Programme de sécurité mature avec des mesures quantitatives. Approche "
            "proactive. Intégration profonde des contrôles dans les processus.",
            "Optimiser la réponse aux incidents. Développer des analyses avancées de "
            "menaces. Renforcer la résilience et la gestion de crise.",
        ),
        (
            "Excellence en cybersécurité. Amélioration continue basée sur l'analyse "
            "prédictive. Culture de sécurité forte à tous les niveaux.",
            "Maintenir l'excellence par l'innovation. Développer des capacités "
            "d'anticipation des menaces. Partager les bonnes pratiques avec l'écosystème.",
        ),
    ),
    "modele_operationnel": (
        (
            "Organisation en silos avec des processus majoritairement informels. Forte "
            "dépendance aux individus clés.",
            "Formaliser les processus de base. Clarifier les rôles et responsabilités. "
            "Identifier les opportunités d'amélioration rapide.",
        ),
        (
            "Processus documentés mais appliqués de façon inégale. Coordination limitée "
            "entre équipes. Mesure de performance partielle.",
            "Standardiser les processus. Améliorer la coordination cross-fonctionnelle. "
            "Développer des indicateurs de performance cohérents.",
        ),
        (
            "Processus bien définis et mesurés. Coordination efficace. Début "
            "d'automatisation des tâches répétitives.",
            "Accélérer l'automatisation. Optimiser les processus basés sur les métriques. "
            "Développer une culture d'amélioration continue.",
        ),
        (
            "Modèle opérationnel mature avec forte automatisation. Alignement étroit avec "
            "les objectifs business. Agilité organisationnelle.",
            "Optimiser la chaîne de valeur end-to-end. Améliorer l'innovation "
            "organisationnelle. Raffiner la mesure de performance.",
        ),
        (
            "Excellence opérationnelle avec optimisation continue. Organisation adaptative "
            "capable d'anticiper les changements du marché.",
            "Maintenir l'excellence par l'innovation organisationnelle. Explorer les "
            "nouvelles technologies disruptives. Devenir un benchmark du secteur.",
        ),
    ),
    "gouvernance_si": (
        (
            "Gouvernance SI ad hoc avec peu de processus formalisés. Décisions prises au "
            "cas par cas. Faible alignement avec la stratégie d'entreprise.",
            "Établir un cadre de gouvernance basique. Formaliser les processus de "
            "priorisation. Améliorer la visibilité sur les décisions SI.",
        ),
        (
            "Cadre de gouvernance défini mais application inégale. Processus documentés "
            "mais gaps significatifs. Alignement partiel avec le business.",
            "Consolider les processus de gouvernance. Améliorer les mécanismes de "
            "reporting. Renforcer l'alignement stratégique.",
        ),
        (
            "Gouvernance SI établie avec processus cohérents et mesurés. Bon alignement "
            "stratégique. Gestion de portefeuille efficace.",
            "Optimiser les processus de prise de décision. Améliorer la gestion de la "
            "valeur. Renforcer la gouvernance des données.",
        ),
        (
            "Gouvernance SI mature avec mesures quantitatives. Excellent alignement "
            "stratégique. Processus d'optimisation continus.",
            "Affiner la mesure de la valeur. Optimiser l'allocation des ressources. "
            "Développer des mécanismes prédictifs d'alignement.",
        ),
        (
            "Excellence en gouvernance SI. Le SI est un moteur d'innovation et de "
            "transformation pour l'entreprise. Optimisation continue.",
            "Maintenir l'excellence par l'innovation en gouvernance. Explorer les "
            "technologies émergentes. Partager les meilleures pratiques.",
        ),
    ),
    "acculturation_data": (
        (
            "Utilisation limitée des données. Silos d'information. Peu de compétences "
            "analytiques. Décisions rarement basées sur les données.",
            "Créer une vision data claire. Identifier des use cases à valeur rapide. "
            "Former aux fondamentaux de la data literacy.",
        ),
        (
            "Quelques initiatives data formalisées. Début de gouvernance. Compétences "
            "analytiques dans des poches isolées. Utilisation basique de BI.",
            "Développer une stratégie data cohérente. Améliorer la qualité et "
            "l'accessibilité des données. Étendre les compétences analytiques.",
        ),
        (
            "Utilisation significative des données dans la prise de décision. Bonne "
            "gouvernance data. Compétences analytiques répandues.",
            "Développer des capacités d'analytique avancée. Améliorer l'intégration des "
            "données. Renforcer la culture data-driven.",
        ),
        (
            "Organisation fortement data-driven. Utilisation répandue de l'analytique "
            "avancée. Gouvernance mature. Création de valeur mesurable.",
            "Développer des capacités d'IA et d'analyse prédictive. Optimiser la "
            "monétisation des données. Automatiser les flux data et insights.",
        ),
        (
            "Excellence en exploitation des données. IA et analytique avancée intégrées "
            "aux processus métier. Culture data omniprésente.",
            "Maintenir l'excellence par l'innovation continue. Explorer les nouvelles "
            "frontières comme l'IA générative. Contribuer à l'écosystème data.",
        ),
    ),
}


# ---------------------------------------------------------------------------
# Thematic levels
# ---------------------------------------------------------------------------

THEMATIC_BANDS: tuple[ScoreRange, ...] = (
    ScoreRange(SCORE_DOMAIN_MIN, INTERMEDIATE_THRESHOLD),
    ScoreRange(INTERMEDIATE_THRESHOLD, ADVANCED_THRESHOLD),
    ScoreRange(ADVANCED_THRESHOLD, SCORE_DOMAIN_MAX),
)

THEMATIC_TIER_SUFFIXES: tuple[tuple[str, str], ...] = (
    ("low", "Faible"),
    ("mid", "Intermédiaire"),
    ("high", "Avancé"),
)

# (id prefix, theme name, label stem, ((description, recommendations) x 3))
CuratedTheme = tuple[str, str, str, tuple[tuple[str, str], ...]]

# Curated DevSecOps thematic levels
CURATED_THEMATIC_LEVELS: dict[str, tuple[CuratedTheme, ...]] = {
    "devsecops": (
        (
            "cult_collab",
            "Culture & Collaboration",
            "Culture & Collaboration",
            (
                (
                    "Les équipes travaillent en silos avec peu de partage de responsabilité "
                    "concernant la sécurité. Communication limitée et réactive.",
                    "Organiser des ateliers inter-équipes. Mettre en place des réunions "
                    "régulières Dev-Ops-Sec. Désigner des ambassadeurs sécurité dans chaque "
                    "équipe.",
                ),
                (
                    "Collaboration ponctuelle entre les équipes. Security Champions identifiés "
                    "mais rôle peu formalisé. Communication existante mais non structurée.",
                    "Formaliser le rôle des Security Champions. Établir des rituels de "
                    "communication réguliers. Mettre en place des rétrospectives "
                    "d'incidents communes.",
                ),
                (
                    "Culture \"security as code\" établie où chaque membre prend sa part de "
                    "responsabilité. Communication fluide et transparente avec canaux dédiés.",
                    "Partager cette culture avec d'autres équipes. Mettre en place un programme "
                    "de reconnaissance. Former les nouveaux arrivants à cette culture "
                    "collaborative.",
                ),
            ),
        ),
        (
            "ops_cicd",
            "Opérations & CI/CD",
            "Opérations & CI/CD",
            (
                (
                    "Processus de déploiement principalement manuels. Peu d'automatisation. "
                    "Contrôles de sécurité absents des pipelines.",
                    "Mettre en place une intégration continue basique. Automatiser les tests "
                    "unitaires. Introduire des scans de vulnérabilités simples.",
                ),
                (
                    "CI en place pour les projets majeurs. Déploiements semi-automatisés. "
                    "Quelques contrôles de sécurité mais non systématiques.",
                    "Étendre CI/CD à tous les projets. Standardiser les pipelines avec security "
                    "gates. Implémenter Infrastructure as Code.",
                ),
                (
                    "CI/CD complet et automatisé. Suite complète de contrôles de sécurité. IaC "
                    "avec tests et vérifications. Déploiements entièrement automatisés.",
                    "Optimiser les performances des pipelines. Explorer le continuous "
                    "deployment. Mettre en place des mécanismes de rollback automatisés en cas "
                    "d'anomalie.",
                ),
            ),
        ),
        (
            "vuln_code",
            "Gestion des vulnérabilités & Sûreté du code",
            "Vulnérabilités & Code",
            (
                (
                    "Absence de mécanismes systématiques de détection des vulnérabilités. "
                    "Analyses de sécurité manuelles et rares.",
                    "Mettre en place des outils SAST/DAST de base. Initier des revues de code "
                    "incluant des vérifications de sécurité.",
                ),
                (
                    "Utilisation partielle d'outils automatisés. Quelques revues de sécurité "
                    "sur le code critique.",
                    "Standardiser l'utilisation d'outils de scan. Former les développeurs aux "
                    "bonnes pratiques de codage sécurisé.",
                ),
                (
                    "Contrôles automatiques intégrés aux pipelines. Revues de code incluant des "
                    "checklists de sécurité. Feedback loop avec correction rapide.",
                    "Aller vers une gestion prédictive des vulnérabilités. Consolider la base "
                    "de code avec des audits réguliers et des bug bounties.",
                ),
            ),
        ),
        (
            "access",
            "Gestion des accès & secrets",
            "Accès & Secrets",
            (
                (
                    "Accès gérés manuellement. Secrets stockés en clair dans le code ou des "
                    "fichiers non sécurisés.",
                    "Mettre en place une gestion centralisée des secrets (Vault, AWS Secrets "
                    "Manager, etc.). Appliquer le principe du moindre privilège.",
                ),
                (
                    "Utilisation partielle de vaults. Accès avec contrôle RBAC mais non "
                    "régulièrement revus.",
                    "Automatiser les audits de permissions. Intégrer la rotation automatique "
                    "des secrets.",
                ),
                (
                    "Secrets chiffrés, rotation automatique. Gestion centralisée intégrée aux "
                    "workflows DevOps.",
                    "Déployer une stratégie zero trust. Analyser les accès à l'aide de "
                    "comportements anormaux (UEBA).",
                ),
            ),
        ),
        (
            "observability",
            "Observabilité & Monitoring",
            "Observabilité",
            (
                (
                    "Peu ou pas de supervision des systèmes. Logs non centralisés. Alertes "
                    "inexistantes ou inefficaces.",
                    "Déployer un système centralisé de logs. Mettre en place une supervision "
                    "basique des services critiques.",
                ),
                (
                    "Monitoring en place pour les applications clés. Tableaux de bord "
                    "partiellement exploités. Alertes parfois ignorées.",
                    "Formaliser les indicateurs clés. Intégrer logs, métriques et traces. "
                    "Mettre en place des alertes pertinentes.",
                ),
                (
                    "Observabilité full stack. Détection proactive des anomalies. Corrélations "
                    "automatisées entre événements.",
                    "Mettre en œuvre l'AIOps. Simuler des incidents (chaos engineering) pour "
                    "tester la réactivité des systèmes.",
                ),
            ),
        ),
        (
            "compliance",
            "Conformité & Gouvernance",
            "Conformité",
            (
                (
                    "Peu ou pas de documentation formelle. Non-conformité aux exigences "
                    "réglementaires. Audits inexistants.",
                    "Cartographier les exigences applicables (RGPD, ISO, etc.). Documenter les "
                    "premières politiques de sécurité.",
                ),
                (
                    "Politiques en place mais application variable. Quelques audits réalisés. "
                    "Suivi des écarts partiel.",
                    "Établir un programme d'audit régulier. Déployer des outils de conformité "
                    "automatique sur les pipelines.",
                ),
                (
                    "Conformité intégrée dès la conception (Security by Design). Documentation "
                    "à jour. Audits passés régulièrement.",
                    "Automatiser les contrôles de conformité. Participer à des certifications "
                    "tierces (ISO, SOC 2...).",
                ),
            ),
        ),
        (
            "training",
            "Formation & Sensibilisation",
            "Formation",
            (
                (
                    "Aucune formation spécifique à la sécurité. Connaissances limitées dans "
                    "les équipes techniques.",
                    "Organiser des sessions d'initiation. Sensibiliser aux erreurs fréquentes. "
                    "Déployer des capsules de microlearning.",
                ),
                (
                    "Formations régulières disponibles. Participants ciblés. Supports à jour "
                    "mais peu interactifs.",
                    "Personnaliser les contenus par profil. Mesurer l'impact des formations. "
                    "Introduire des serious games ou challenges.",
                ),
                (
                    "Culture de formation continue. Programmes adaptés, évalués et révisés. "
                    "Implication de champions internes.",
                    "Formaliser des parcours certifiants. Développer un système de mentorat. "
                    "Valoriser les compétences sécurité.",
                ),
            ),
        ),
        (
            "satisfaction",
            "Satisfaction Client & Time-to-Market",
            "Satisfaction & Time-to-Market",
            (
                (
                    "Livraisons peu fréquentes. Faible visibilité sur les besoins clients. "
                    "Retours rares ou ignorés.",
                    "Mettre en place un suivi des incidents. Recueillir les retours des "
                    "utilisateurs. Identifier les irritants.",
                ),
                (
                    "Livraisons régulières mais non continues. KPIs suivis mais peu liés à "
                    "l'expérience utilisateur.",
                    "Aligner les KPIs sur la valeur client. Accélérer le cycle de feedback. "
                    "Engager les utilisateurs dans les phases de test.",
                ),
                (
                    "Livraisons fréquentes et fiables. Amélioration continue en réponse aux "
                    "feedbacks clients. Time-to-market optimisé.",
                    "Mettre en œuvre des mécanismes de priorisation client. Co-construire les "
                    "solutions. Suivre le NPS de manière continue.",
                ),
            ),
        ),
        (
            "industrialisation",
            "Industrialisation & Standardisation",
            "Industrialisation",
            (
                (
                    "Processus artisanaux. Forte variabilité entre projets. Outils et "
                    "pratiques hétérogènes.",
                    "Identifier les processus répétitifs. Documenter les bonnes pratiques. "
                    "Unifier les outils critiques.",
                ),
                (
                    "Début de standardisation. Bonnes pratiques partiellement partagées. "
                    "Industrialisation limitée à certains domaines.",
                    "Déployer des templates communs. Formaliser des procédures "
                    "opérationnelles. Suivre les gains réalisés.",
                ),
                (
                    "Pratiques homogènes à l'échelle de l'organisation. Outils mutualisés. "
                    "Réduction significative des erreurs et délais.",
                    "Mesurer la maturité des processus. Promouvoir l'amélioration continue. "
                    "Documenter et partager les retours d'expérience.",
                ),
            ),
        ),
    ),
}

# Functions whose themes use the standard tier texts below. Level ids are
# "{prefix}_{slugify_theme(theme)}_{low|mid|high}".
TEMPLATED_THEMATIC_PREFIXES: dict[str, str] = {
    "cybersecurite": "cyber",
    "modele_operationnel": "ops",
    "gouvernance_si": "gouv",
    "acculturation_data": "data",
}

# (description, recommendations) per tier, lowest first
STANDARD_THEMATIC_TEXTS: tuple[tuple[str, str], ...] = (
    (
        "Maturité faible sur cette thématique. Pratiques peu formalisées, approche "
        "majoritairement réactive.",
        "Structurer les fondations. Mettre en place des pratiques de base et "
        "sensibiliser les équipes.",
    ),
    (
        "Niveau de maturité moyen. Pratiques partiellement définies et en cours de "
        "structuration.",
        "Standardiser et renforcer les processus existants. Encourager l'amélioration "
        "continue.",
    ),
    (
        "Niveau avancé. Pratiques bien établies, mesurées et intégrées dans les processus.",
        "Capitaliser sur les acquis. Promouvoir l'innovation, le partage de bonnes "
        "pratiques et l'excellence opérationnelle.",
    ),
)
