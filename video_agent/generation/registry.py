"""
Lookup tables - Maps Platform and StyleBucket to their text templates.

Every branch of the pipeline (platform x style x duration bucket) is a table
lookup here; adding a platform or a style means adding one entry.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from video_agent.core.enums import Platform, StyleBucket
from video_agent.core.utils import fold_accents, lower_first, strip_terminal_punctuation, upper_first
from video_agent.generation.models import Brief


@dataclass(frozen=True)
class PlatformDefinition:
    """Everything that changes with the target platform."""

    label: str
    strategy_template: str
    retention_window: str
    soundtrack_pacing: str
    framing: str
    hashtags: Tuple[str, ...]
    description_closing: str


@dataclass(frozen=True)
class AlternativeAngle:
    angle: str
    hook_template: str
    reason: str


@dataclass(frozen=True)
class StyleDefinition:
    """Everything that changes with the style family."""

    aliases: Tuple[str, ...]
    tone: str
    emotional_axis: str
    hook_template: str
    climax_template: str
    cta_template: str
    soundtrack_mood: str
    framing_mood: str
    hashtags: Tuple[str, ...]
    alternative: AlternativeAngle


@dataclass(frozen=True)
class DevelopmentBeat:
    overlay: str
    template: str


PLATFORM_REGISTRY: Dict[Platform, PlatformDefinition] = {
    Platform.TIKTOK: PlatformDefinition(
        label="TikTok",
        strategy_template=(
            "No TikTok, o vídeo é decidido nos primeiros 1 a 3 segundos: abra direto no gancho, "
            "com legenda grande e rosto em cena. Mantenha cortes a cada 2 ou 3 segundos ao longo "
            "dos {duration}s, com tom {tone}, e use um som em alta em volume baixo sob a voz."
        ),
        retention_window="nos primeiros 3 segundos",
        soundtrack_pacing="com batida marcada que acompanhe cortes a cada 2 ou 3 segundos",
        framing="Vertical 9:16 com rosto no terço superior e legenda centralizada fora da área da interface",
        hashtags=("#tiktok", "#fyp"),
        description_closing="Salve para rever antes do próximo vídeo.",
    ),
    Platform.YOUTUBE_SHORT: PlatformDefinition(
        label="YouTube Shorts",
        strategy_template=(
            "No YouTube Shorts, o primeiro quadro precisa funcionar como miniatura e o final deve "
            "emendar no início para favorecer o replay. Em {duration}s, entregue uma ideia por vez, "
            "com tom {tone}, e feche com uma frase que convide a assistir de novo."
        ),
        retention_window="no primeiro quadro",
        soundtrack_pacing="em loop limpo que permita emendar o final no começo",
        framing="Vertical 9:16 com o texto principal já no primeiro quadro e enquadramento médio estável",
        hashtags=("#shorts", "#youtubeshorts"),
        description_closing="Inscreva-se para receber os próximos Shorts da série.",
    ),
    Platform.YOUTUBE_LONG: PlatformDefinition(
        label="YouTube Longo",
        strategy_template=(
            "No YouTube em formato longo, a retenção se constrói no meio do vídeo: prometa o "
            "resultado nos primeiros 30 segundos, crie pontos de retenção a cada 60 a 90 segundos "
            "e divida os {duration}s em capítulos claros. Mantenha tom {tone} e reforce a promessa "
            "antes da virada."
        ),
        retention_window="nos primeiros 30 segundos e a cada capítulo",
        soundtrack_pacing="com variações suaves a cada capítulo para marcar os pontos de retenção",
        framing=(
            "Horizontal 16:9 em plano médio, com cortes para plano fechado nas viradas "
            "e b-roll nos exemplos"
        ),
        hashtags=("#youtube", "#youtubebrasil"),
        description_closing="Capítulos: gancho, contexto, desenvolvimento, virada e próximo passo.",
    ),
    Platform.KWAI: PlatformDefinition(
        label="Kwai",
        strategy_template=(
            "No Kwai, fale de forma direta e popular, como numa conversa: mostre o problema logo na "
            "abertura e peça um comentário cedo, antes da metade dos {duration}s. Mantenha tom "
            "{tone}, com linguagem simples e exemplos do dia a dia."
        ),
        retention_window="na primeira frase",
        soundtrack_pacing="com áudio popular e energia constante, sem abafar a voz",
        framing="Vertical 9:16 em plano fechado, câmera na altura dos olhos e ambiente real ao fundo",
        hashtags=("#kwai", "#kwaibrasil"),
        description_closing="Comenta aqui embaixo e manda para quem precisa ver isso.",
    ),
}


STYLE_REGISTRY: Dict[StyleBucket, StyleDefinition] = {
    StyleBucket.EMOTIONAL: StyleDefinition(
        aliases=("emotional", "emocional", "emocao"),
        tone="acolhedor e intenso",
        emotional_axis="do medo para a coragem",
        hook_template="Se {core_pain} te acompanha em {theme}, fica até o fim.",
        climax_template=(
            "A virada: {core_pain} não some de uma vez, mas perde força no dia em que "
            "você decide agir com medo mesmo."
        ),
        cta_template="Se isso tocou você, {desired_action}.",
        soundtrack_mood="Piano ou cordas suaves que crescem até a virada",
        framing_mood="com luz quente e pausas no olhar para a câmera",
        hashtags=("#emocional", "#superacao"),
        alternative=AlternativeAngle(
            angle="Vulnerabilidade em primeira pessoa",
            hook_template="Eu quase desisti de {theme} por causa de {core_pain}. Foi isso que me segurou.",
            reason="Confissões em primeira pessoa geram identificação imediata e seguram o público até a explicação.",
        ),
    ),
    StyleBucket.EDUCATIONAL: StyleDefinition(
        aliases=("educational", "educativo", "educacional", "educacao"),
        tone="claro e didático",
        emotional_axis="da confusão para a clareza",
        hook_template="Existe um motivo simples para {core_pain} em {theme}, e quase ninguém explica.",
        climax_template="O ponto central: {core_pain} é sintoma de um processo sem etapas, e etapas se aprendem.",
        cta_template="Para fixar o que você aprendeu, {desired_action}.",
        soundtrack_mood="Trilha instrumental leve em lo-fi, sem vocais",
        framing_mood="com espaço lateral para tópicos na tela e gestos que marquem cada etapa",
        hashtags=("#educativo", "#aprenda"),
        alternative=AlternativeAngle(
            angle="Mito contra fato",
            hook_template="Todo mundo repete uma regra sobre {theme} que só piora {core_pain}.",
            reason="Derrubar uma crença comum cria curiosidade e posiciona o vídeo como fonte confiável.",
        ),
    ),
    StyleBucket.PROVOCATIVE: StyleDefinition(
        aliases=("provocative", "provocativo", "polemico"),
        tone="direto e provocador",
        emotional_axis="do conforto para o confronto",
        hook_template="{core_pain_title} não é falta de talento em {theme}: é escolha.",
        climax_template=(
            "A verdade incômoda: enquanto {core_pain} for desculpa, nada muda, "
            "e só você pode encerrar esse ciclo."
        ),
        cta_template="Concordando ou discordando, {desired_action}.",
        soundtrack_mood="Batida grave e seca com silêncio antes das frases de impacto",
        framing_mood="com câmera próxima, olhar fixo na lente e cortes secos",
        hashtags=("#verdade", "#polemica"),
        alternative=AlternativeAngle(
            angle="Pergunta desafiadora",
            hook_template="E se {core_pain} for exatamente o que te mantém parado em {theme}?",
            reason="Perguntas que confrontam o espectador provocam resposta nos comentários e aumentam o tempo de tela.",
        ),
    ),
    StyleBucket.FAITH: StyleDefinition(
        aliases=("faith", "fe", "espiritual", "espiritualidade"),
        tone="esperançoso e sereno",
        emotional_axis="da aflição para a esperança",
        hook_template="Se {core_pain} pesa no seu coração em {theme}, esta mensagem é para você.",
        climax_template="A fé não apaga {core_pain}, mas lembra que você não está carregando isso sozinho.",
        cta_template="Se essa palavra falou com você, {desired_action}.",
        soundtrack_mood="Louvor instrumental ou pads ambientes serenos",
        framing_mood="com luz natural suave, enquadramento aberto e ritmo calmo",
        hashtags=("#fe", "#esperanca"),
        alternative=AlternativeAngle(
            angle="Testemunho",
            hook_template="Houve um tempo em que {core_pain} me fazia duvidar de tudo em {theme}.",
            reason="Testemunhos pessoais criam conexão e abrem espaço para o público compartilhar a própria história.",
        ),
    ),
    StyleBucket.BUSINESS: StyleDefinition(
        aliases=("business", "negocios", "empreendedorismo", "vendas"),
        tone="objetivo e estratégico",
        emotional_axis="do prejuízo para o resultado",
        hook_template="{core_pain_title} está custando resultado em {theme}. Veja o impacto.",
        climax_template="O resultado aparece quando {core_pain} vira processo: medir, ajustar e repetir toda semana.",
        cta_template="Para aplicar isso no seu negócio, {desired_action}.",
        soundtrack_mood="Trilha corporativa moderna com batida constante e sem vocais",
        framing_mood="com cenário de trabalho organizado e números na tela",
        hashtags=("#negocios", "#empreendedorismo"),
        alternative=AlternativeAngle(
            angle="Número concreto",
            hook_template="Quanto {core_pain} já custou para você em {theme}? A conta assusta.",
            reason="Números e custos concretos prendem quem pensa em resultado e geram debate.",
        ),
    ),
    StyleBucket.NEUTRAL: StyleDefinition(
        aliases=(),
        tone="direto e humano",
        emotional_axis="da dúvida para a ação",
        hook_template="Se {core_pain} aparece sempre que o assunto é {theme}, presta atenção.",
        climax_template=(
            "A mudança começa quando {core_pain} deixa de ser o fim da história "
            "e vira o ponto de partida."
        ),
        cta_template="Agora é com você: {desired_action}.",
        soundtrack_mood="Trilha instrumental neutra em volume baixo sob a voz",
        framing_mood="com fundo limpo e boa iluminação frontal",
        hashtags=("#dicas", "#conteudo"),
        alternative=AlternativeAngle(
            angle="Pergunta direta",
            hook_template="Você sente {core_pain} sempre que pensa em {theme}?",
            reason=(
                "Perguntas diretas fazem o espectador se reconhecer e responder mentalmente, "
                "o que segura os primeiros segundos."
            ),
        ),
    ),
}


CONTEXT_TEMPLATE = (
    "Para {audience}, {core_pain} não é detalhe: é o que separa a intenção "
    "do passo de {desired_action}."
)

# Ordered by narrative priority; a script takes the first N for its duration bucket
DEVELOPMENT_BEATS: Tuple[DevelopmentBeat, ...] = (
    DevelopmentBeat(
        overlay="O momento exato",
        template="Mostre o momento exato em que {core_pain} aparece, a cena que {audience} reconhece na hora.",
    ),
    DevelopmentBeat(
        overlay="O erro invisível",
        template="Nomeie o erro invisível: tentar avançar em {theme} sem encarar {core_pain} primeiro.",
    ),
    DevelopmentBeat(
        overlay="O primeiro passo",
        template="Apresente a virada prática: um passo pequeno que dá para aplicar hoje, mesmo com pouco tempo.",
    ),
    DevelopmentBeat(
        overlay="A prova",
        template="Traga uma prova concreta: um exemplo real de quem saiu de {core_pain} com esse passo.",
    ),
    DevelopmentBeat(
        overlay="A objeção",
        template="Antecipe a objeção mais comum de {audience} e responda em uma frase antes de seguir.",
    ),
)

RETENTION_CHECKPOINT = "Ponto de retenção: retome a pergunta do gancho e prometa a virada que vem a seguir."

# Enough distinct tags to reach the largest allowed hashtag count on their own
GENERIC_HASHTAGS: Tuple[str, ...] = (
    "#conteudo", "#criadores", "#dicas", "#video", "#roteiro",
    "#aprendizado", "#motivacao", "#brasil", "#reflexao", "#viral",
)


# Options a form presents; labels and defaults as the product shows them
PLATFORM_OPTIONS: List[Tuple[Platform, str]] = [
    (platform, definition.label) for platform, definition in PLATFORM_REGISTRY.items()
]

STYLE_OPTIONS: List[Tuple[str, str]] = [
    ("emocional", "Emocional"),
    ("educativo", "Educativo"),
    ("provocativo", "Provocativo"),
    ("fé", "Fé"),
    ("negócios", "Negócios"),
]

DEFAULT_PLATFORM = Platform.TIKTOK
DEFAULT_DURATION = 45
DEFAULT_STYLE = "emocional"


_STYLE_ALIASES: Dict[str, StyleBucket] = {
    alias: bucket for bucket, definition in STYLE_REGISTRY.items() for alias in definition.aliases
}


def get_platform_definition(platform: Platform) -> PlatformDefinition:
    """
    Get the definition for a platform.

    Args:
        platform: The platform to look up

    Returns:
        PlatformDefinition for the platform

    Raises:
        ValueError: If the platform is not registered
    """
    if platform not in PLATFORM_REGISTRY:
        raise ValueError(f"Platform {platform} is not registered. Available: {list(PLATFORM_REGISTRY.keys())}")
    return PLATFORM_REGISTRY[platform]


def resolve_style(style: str) -> StyleBucket:
    """
    Resolve a free-text style label to its bucket.

    Matching ignores case and accents ("Fé", "fe" and "faith" are the same
    style). Unknown or empty labels resolve to ``StyleBucket.NEUTRAL``.
    """
    key = fold_accents(style or "").strip().lower()
    return _STYLE_ALIASES.get(key, StyleBucket.NEUTRAL)


def get_style_definition(style: str) -> StyleDefinition:
    return STYLE_REGISTRY[resolve_style(style)]


def template_fields(brief: Brief) -> Dict[str, str]:
    """
    Brief fields prepared for insertion into templates.

    Fields are placed mid-sentence, so their first letter is lowercased and
    their trailing punctuation dropped. ``*_title`` variants start a sentence.
    """
    core_pain = lower_first(strip_terminal_punctuation(brief.core_pain))
    theme = lower_first(strip_terminal_punctuation(brief.theme))
    return {
        "theme": theme,
        "theme_title": upper_first(theme),
        "core_pain": core_pain,
        "core_pain_title": upper_first(core_pain),
        "audience": lower_first(strip_terminal_punctuation(brief.audience)),
        "desired_action": lower_first(strip_terminal_punctuation(brief.desired_action)),
    }
