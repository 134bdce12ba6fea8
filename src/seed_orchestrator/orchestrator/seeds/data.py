"""Static reference data written by the seed tasks."""

from __future__ import annotations

from typing import Any


class Roles:
    SUPER_ADMIN = "Super Administrador"
    ADMINISTRATOR = "Administrador"
    PROFESSOR = "Professor"
    STUDENT = "Aluno"
    COMPANY = "Empresa"
    PEDAGOGICAL = "Setor Pedagógico"
    RECRUITER = "Recrutadores"
    HR = "Recursos Humanos"


ROLES: list[dict[str, Any]] = [
    {"name": Roles.PROFESSOR, "level": 1, "status": 1, "description": "Professores e instrutores"},
    {"name": Roles.STUDENT, "level": 2, "status": 1, "description": "Alunos do sistema"},
    {"name": Roles.COMPANY, "level": 3, "status": 1, "description": "Empresas parceiras"},
    {
        "name": Roles.ADMINISTRATOR,
        "level": 4,
        "status": 1,
        "description": "Administradores do sistema",
    },
    {
        "name": Roles.RECRUITER,
        "level": 5,
        "status": 1,
        "description": "Profissionais de recrutamento",
    },
    {"name": Roles.PEDAGOGICAL, "level": 6, "status": 1, "description": "Equipe pedagógica"},
    {"name": Roles.HR, "level": 7, "status": 1, "description": "Equipe de RH"},
    {"name": Roles.SUPER_ADMIN, "level": 8, "status": 1, "description": "Acesso total ao sistema"},
]

# The admin password is a bcrypt hash of "admin@123".
ADMIN_USER: dict[str, Any] = {
    "email": "admin@sistema.com",
    "password": "$2a$10$kIqR/PTloYan/MRNiEsy6uYO6OCHVmAKR4kFVbL9mA9Xt0f9w2IP6",
    "matricula": "AD999ZZ",
    "name": "Administrador do Sistema",
    "cpf": "00000000000",
    "userType": "PESSOA_FISICA",
    "isActive": True,
}


def _plan_features(
    tagline: str, vacancies: int, *, featured: bool = False, advanced: bool = False
) -> dict[str, Any]:
    benefits = [
        "Vagas ilimitadas" if vacancies == -1 else f"{vacancies} vagas ativas",
        "30 dias de divulgação",
        "Acesso a candidatos qualificados",
        f"Painel de controle {'avançado' if advanced else 'básico'}",
    ]
    if featured:
        benefits.append("1 vaga em destaque")
    return {
        "tagline": tagline,
        "vacancies": vacancies,
        "advertisingDays": 30,
        "qualifiedCandidates": True,
        "basicControl": not advanced,
        "featuredVacancy": featured,
        "advancedControl": advanced,
        "benefitsList": benefits,
    }


def _jobs_config(
    max_offers: int, featured: int = 0, *, confidential: bool = False, premium: bool = False
) -> dict[str, Any]:
    return {
        "maxJobOffers": max_offers,
        "featuredJobOffers": featured,
        "confidentialOffers": confidential,
        "resumeAccess": True,
        "allowPremiumFilters": premium,
    }


_PLAN_DESCRIPTION = "Aumente a produtividade e a criatividade com o acesso expandido."

SUBSCRIPTION_PLANS: list[dict[str, Any]] = [
    {
        "name": "Inicial",
        "price": 49.99,
        "description": _PLAN_DESCRIPTION,
        "interval": "MONTHLY",
        "intervalCount": 1,
        "features": _plan_features("Comece a recrutar com eficiência", 3),
        "jobsConfig": _jobs_config(3),
        "isActive": True,
        "isPopular": False,
    },
    {
        "name": "Intermediário",
        "price": 74.99,
        "description": _PLAN_DESCRIPTION,
        "interval": "MONTHLY",
        "intervalCount": 1,
        "features": _plan_features("Amplie seu alcance de recrutamento", 10),
        "jobsConfig": _jobs_config(10),
        "isActive": True,
        "isPopular": False,
    },
    {
        "name": "Avançado",
        "price": 99.99,
        "description": _PLAN_DESCRIPTION,
        "interval": "MONTHLY",
        "intervalCount": 1,
        "features": _plan_features("Solução completa para grandes equipes", 20),
        "jobsConfig": _jobs_config(20, confidential=True, premium=True),
        "isActive": True,
        "isPopular": True,
    },
    {
        "name": "Destaque",
        "price": 199.99,
        "description": _PLAN_DESCRIPTION,
        "interval": "MONTHLY",
        "intervalCount": 1,
        "features": _plan_features("Recrutamento sem limites", -1, featured=True, advanced=True),
        "jobsConfig": _jobs_config(-1, 1, confidential=True, premium=True),
        "isActive": True,
        "isPopular": False,
    },
]

PAYMENT_METHODS: list[dict[str, Any]] = [
    {
        "type": "CREDIT_CARD",
        "name": "Cartão de Crédito",
        "description": "Pagamento via cartão de crédito (Visa, Mastercard, etc.)",
        "mpPaymentTypeId": "credit_card",
        "processingFee": 4.99,
        "isActive": True,
    },
    {
        "type": "DEBIT_CARD",
        "name": "Cartão de Débito",
        "description": "Pagamento via cartão de débito",
        "mpPaymentTypeId": "debit_card",
        "processingFee": 3.99,
        "isActive": True,
    },
    {
        "type": "PIX",
        "name": "PIX",
        "description": "Transferência instantânea via PIX",
        "mpPaymentTypeId": "pix",
        "processingFee": 1.99,
        "isActive": True,
    },
    {
        "type": "BANK_SLIP",
        "name": "Boleto Bancário",
        "description": "Pagamento via boleto bancário",
        "mpPaymentTypeId": "ticket",
        "processingFee": 2.99,
        "isActive": True,
    },
]

COUPONS: list[dict[str, Any]] = [
    {
        "code": "WELCOME10",
        "name": "Boas-vindas 10%",
        "discountType": "PERCENTAGE",
        "discountValue": 10.0,
        "validityDays": 365,
        "usageLimit": 1000,
        "onlyFirstPurchase": True,
    },
    {
        "code": "50OFF",
        "name": "R$50 de desconto",
        "discountType": "FIXED_AMOUNT",
        "discountValue": 50.0,
        "minPurchaseAmount": 100.0,
        "validityDays": 90,
        "usageLimit": 500,
    },
    {
        "code": "BLACKFRIDAY30",
        "name": "Black Friday 30%",
        "discountType": "PERCENTAGE",
        "discountValue": 30.0,
        "maxDiscountAmount": 150.0,
        "validityDays": 10,
        "usageLimit": 2000,
    },
    {
        "code": "EMPRESA20",
        "name": "Empresas 20%",
        "discountType": "PERCENTAGE",
        "discountValue": 20.0,
        "validityDays": 180,
        "usageLimit": 300,
        "userTypeLimitation": "PESSOA_JURIDICA",
        "restrictedToPlans": ["Avançado", "Destaque"],
    },
    {
        "code": "ANNUAL25",
        "name": "Anual 25%",
        "discountType": "PERCENTAGE",
        "discountValue": 25.0,
        "validityDays": 365,
        "usageLimit": 200,
    },
]

COURSE_AREAS: list[dict[str, Any]] = [
    {"name": "Administração", "displayOrder": 1},
    {"name": "Tecnologia", "displayOrder": 2},
    {"name": "Recursos Humanos", "displayOrder": 3},
    {"name": "Marketing", "displayOrder": 4},
    {"name": "Saúde", "displayOrder": 5},
    {"name": "Educação", "displayOrder": 6},
    {"name": "Direito", "displayOrder": 7},
    {"name": "Finanças", "displayOrder": 8},
    {"name": "Engenharia", "displayOrder": 9},
]

COURSE_CATEGORIES: list[dict[str, Any]] = [
    {"name": "Desenvolvimento Web", "area": "Tecnologia"},
    {"name": "Ciência de Dados", "area": "Tecnologia"},
    {"name": "DevOps", "area": "Tecnologia"},
    {"name": "Cibersegurança", "area": "Tecnologia"},
    {"name": "Gestão de Pessoas", "area": "Recursos Humanos"},
    {"name": "Marketing Digital", "area": "Marketing"},
]

COURSE_TYPES: list[dict[str, Any]] = [
    {"name": "GRATUITO", "description": "Curso totalmente gratuito"},
    {"name": "PAGO", "description": "Curso com valor fixo pago uma única vez"},
    {"name": "ASSINATURA", "description": "Curso incluído em planos de assinatura"},
    {"name": "FREEMIUM", "description": "Conteúdo básico gratuito com módulos pagos"},
    {"name": "CERTIFICAÇÃO", "description": "Curso preparatório para certificação"},
    {"name": "IN_COMPANY", "description": "Curso personalizado para empresas"},
]

COURSE_MODALITIES: list[dict[str, Any]] = [
    {"name": "ONLINE", "description": "Curso 100% online"},
    {"name": "PRESENCIAL", "description": "Curso com aulas presenciais"},
    {"name": "HIBRIDO", "description": "Curso com aulas online e presenciais"},
    {"name": "LIVE", "description": "Aulas ao vivo transmitidas online"},
]

LESSON_TYPES: list[dict[str, Any]] = [
    {"name": "VIDEO", "description": "Aula em formato de vídeo gravado"},
    {"name": "TEXTO", "description": "Aula em formato de texto/leitura"},
    {"name": "QUIZ", "description": "Atividade interativa com perguntas e respostas"},
    {"name": "LIVE", "description": "Aula ao vivo com interação em tempo real"},
    {"name": "DOCUMENTO", "description": "Material em formato de documento para download"},
    {"name": "TAREFA", "description": "Atividade prática para entrega"},
    {"name": "FORUM", "description": "Discussão em grupo sobre um tema específico"},
    {"name": "PODCAST", "description": "Conteúdo em formato de áudio"},
    {"name": "WEBINAR", "description": "Seminário ou apresentação online"},
    {"name": "ESTUDO_DE_CASO", "description": "Análise detalhada de situações reais"},
    {"name": "LABORATÓRIO_VIRTUAL", "description": "Ambiente de prática simulada"},
]

EXAM_TYPES: list[dict[str, Any]] = [
    {"name": "ONLINE", "description": "Avaliação realizada online com tempo controlado"},
    {"name": "PRESENCIAL", "description": "Avaliação realizada presencialmente"},
    {"name": "PROJETO", "description": "Avaliação baseada em projeto prático"},
    {"name": "DISSERTATIVA", "description": "Avaliação com questões dissertativas"},
    {"name": "MULTIPLA_ESCOLHA", "description": "Avaliação com questões de múltipla escolha"},
    {
        "name": "MISTA",
        "description": "Avaliação com questões dissertativas e de múltipla escolha",
    },
    {"name": "PROVA_ORAL", "description": "Avaliação realizada verbalmente"},
    {"name": "APRESENTAÇÃO", "description": "Avaliação por meio de apresentação"},
    {"name": "SIMULADO", "description": "Simulação de prova oficial"},
    {"name": "AUTOAVALIAÇÃO", "description": "Processo de avaliação pelo próprio aluno"},
]

COURSES: list[dict[str, Any]] = [
    {
        "title": "Introdução ao Desenvolvimento Web",
        "category": "Desenvolvimento Web",
        "type": "GRATUITO",
        "modality": "ONLINE",
        "workload": 40,
        "price": 0.0,
    },
    {
        "title": "Análise de Dados com Python",
        "category": "Ciência de Dados",
        "type": "PAGO",
        "modality": "ONLINE",
        "workload": 60,
        "price": 297.0,
    },
    {
        "title": "Pipelines de Entrega Contínua",
        "category": "DevOps",
        "type": "ASSINATURA",
        "modality": "HIBRIDO",
        "workload": 32,
        "price": 0.0,
    },
    {
        "title": "Recrutamento e Seleção por Competências",
        "category": "Gestão de Pessoas",
        "type": "CERTIFICAÇÃO",
        "modality": "LIVE",
        "workload": 24,
        "price": 189.9,
    },
]

CERTIFICATE_TEMPLATES: list[dict[str, Any]] = [
    {
        "name": "Certificado Padrão",
        "description": "Modelo de certificado de conclusão de curso",
        "orientation": "landscape",
        "completionCriteria": "COURSE_COMPLETION",
        "minimumScore": 70,
    },
    {
        "name": "Certificado de Certificação",
        "description": "Modelo para cursos preparatórios de certificação",
        "orientation": "landscape",
        "completionCriteria": "EXAM_APPROVAL",
        "minimumScore": 80,
        "courseType": "CERTIFICAÇÃO",
    },
]

JOB_OFFERS: list[dict[str, Any]] = [
    {
        "title": "Desenvolvedor(a) Backend Pleno",
        "location": "São Paulo, SP",
        "experienceLevel": "PLENO",
        "hiringType": "CLT",
        "isConfidential": False,
        "maxApplications": 100,
    },
    {
        "title": "Analista de Recursos Humanos",
        "location": "Remoto",
        "experienceLevel": "JUNIOR",
        "hiringType": "CLT",
        "isConfidential": False,
        "maxApplications": None,
    },
    {
        "title": "Gerente de Projetos",
        "location": "Belo Horizonte, MG",
        "experienceLevel": "SENIOR",
        "hiringType": "PJ",
        "isConfidential": True,
        "maxApplications": 30,
    },
]
