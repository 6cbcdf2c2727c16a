"""
Prompt construction for narration scripts.
Pure: the same request always yields byte-identical prompt text.
"""

from script_automation.domain.models import DurationClass, GenerationRequest, VideoStyle

WORDS_PER_MINUTE = 150  # average narration pace

STYLE_INSTRUCTIONS = {
    VideoStyle.INFORMATIVE: (
        "Tom informativo: claro, objetivo e confiável. Apresente fatos, dados e "
        "contexto de forma direta, sem sensacionalismo."
    ),
    VideoStyle.EDUCATIONAL: (
        "Tom educacional: didático e paciente. Explique conceitos passo a passo, "
        "use exemplos e analogias e recapitule os pontos principais."
    ),
    VideoStyle.ENTERTAINMENT: (
        "Tom de entretenimento: leve, envolvente e divertido. Use curiosidades, "
        "humor na medida certa e um ritmo dinâmico."
    ),
    VideoStyle.TUTORIAL: (
        "Tom de tutorial: prático e orientado à ação. Organize o conteúdo em etapas "
        "numeradas, com instruções claras que o espectador possa seguir."
    ),
    VideoStyle.STORYTELLING: (
        "Tom de storytelling: narrativo e emocional. Conduza o espectador por uma "
        "história com começo, meio e fim, criando tensão e curiosidade."
    ),
}

DURATION_INSTRUCTIONS = {
    DurationClass.SHORT: (
        "Ritmo enxuto, focado em uma única ideia central, sem desvios. "
        "Um gancho rápido, de 2 a 3 blocos curtos e uma chamada para ação breve."
    ),
    DurationClass.MEDIUM: (
        "Várias seções (de 3 a 5), cada uma com um subtítulo, ligadas por "
        "transições naturais entre um assunto e outro."
    ),
    DurationClass.LONG: (
        "Roteiro completo com introdução, desenvolvimento dividido em várias seções "
        "aprofundadas (6 ou mais, com subtítulos e transições) e conclusão que "
        "retoma as ideias principais."
    ),
}

_WORD_TARGETS = {
    DurationClass.SHORT: (2, 4),
    DurationClass.MEDIUM: (5, 8),
    DurationClass.LONG: (10, 12),
}


def _word_target(duration: DurationClass) -> str:
    low, high = _WORD_TARGETS[duration]
    if duration is DurationClass.LONG:
        return f"pelo menos {low * WORDS_PER_MINUTE} palavras"
    return f"entre {low * WORDS_PER_MINUTE} e {high * WORDS_PER_MINUTE} palavras"


def build_prompt(request: GenerationRequest) -> str:
    """Build the instruction sent to the model for one request."""
    style = VideoStyle.parse(request.style)
    duration = DurationClass.parse(request.duration)

    return f"""Você é um roteirista especializado em vídeos para canais "dark" do YouTube (vídeos sem rosto, apenas narração em off com imagens de apoio).

Escreva um roteiro de narração completo, em português do Brasil, sobre o seguinte tópico:

Tópico: {request.topic}

ESTILO
{STYLE_INSTRUCTIONS[style]}

DURAÇÃO ESTIMADA: {duration.minutes} (aproximadamente {_word_target(duration)} de narração)
{DURATION_INSTRUCTIONS[duration]}

ESTRUTURA OBRIGATÓRIA
1. Gancho inicial: as primeiras frases devem prender a atenção nos primeiros segundos.
2. Seções do conteúdo, na ordem em que serão narradas.
3. Chamada para ação no final: peça para curtir, se inscrever no canal e comentar.

REGRAS
- Escreva o texto exatamente como será falado pelo narrador, em frases naturais para leitura em voz alta.
- Sugira imagens ou cenas de apoio entre colchetes, por exemplo: [Cena: vista aérea de montanhas].
- Não mencione que você é uma IA e não faça comentários sobre o roteiro.
- Não use blocos de código nem formatação markdown (sem ``` e sem **).
- Retorne APENAS o roteiro, sem introdução, explicação ou observações antes ou depois."""
