"""
Deterministic slide deck built straight from extracted business content.

Used whenever the presentation agent is unavailable.  The deck follows a fixed
skeleton (intro, title, topic slides, traction, charts, team, funding, thank
you); topic slides are only emitted when their section has sentences.  Every
slide after the intro carries an ``image_prompt`` so images can be generated
for it later.
"""

from __future__ import annotations

from urllib.parse import quote_plus

from pitchcraft.core.charts import ChartIntent, synthesize_chart
from pitchcraft.core.config import settings
from pitchcraft.schemas.business import BusinessContent, MetricType, SectionKey, format_number
from pitchcraft.schemas.presentation import (
    MetricIcon,
    SlideMetric,
    SlideRecord,
    SlideType,
)

INTRO_TITLE = "PitchCraft AI"
MAX_BULLET_POINTS = 5


def placeholder_image_url(label: str) -> str:
    """Return an always-resolvable placeholder image reference for *label*."""
    return (
        f"{settings.PLACEHOLDER_IMAGE_PATH}"
        f"?height={settings.PLACEHOLDER_IMAGE_HEIGHT}"
        f"&width={settings.PLACEHOLDER_IMAGE_WIDTH}"
        f"&text={quote_plus(label)}"
    )


def _metrics(*items: tuple[str, str, MetricIcon]) -> list[SlideMetric]:
    return [SlideMetric(label=label, value=value, icon=icon) for label, value, icon in items]


class _DeckBuilder:
    """Accumulates slides and hands out positional ids."""

    def __init__(self) -> None:
        self.slides: list[SlideRecord] = []

    def add(self, **fields) -> SlideRecord:
        slide = SlideRecord(id=len(self.slides), **fields)
        self.slides.append(slide)
        return slide


# ---------------------------------------------------------------------------
# Topic slides (problem / solution / market / business model / competition)
# ---------------------------------------------------------------------------

def _topic_slides(company: str) -> list[tuple[SectionKey, dict]]:
    return [
        (SectionKey.problem, {
            "title": "The Problem We're Solving",
            "content": f"{company} addresses critical market challenges that create significant opportunities.",
            "image_label": "Problem Analysis",
            "image_prompt": f"Visual representation of the market problem that {company} is solving",
            "metrics": _metrics(
                ("Market Impact", "High", MetricIcon.trending_up),
                ("Urgency", "Critical", MetricIcon.target),
                ("Opportunity", "Large", MetricIcon.dollar_sign),
                ("Timing", "Now", MetricIcon.zap),
            ),
        }),
        (SectionKey.solution, {
            "title": f"{company}'s Solution",
            "content": "Our innovative approach addresses core market needs with cutting-edge technology.",
            "image_label": "Solution Overview",
            "image_prompt": f"Product visualization and solution overview for {company}",
            "metrics": _metrics(
                ("Innovation", "Breakthrough", MetricIcon.rocket),
                ("Scalability", "Global", MetricIcon.globe),
                ("Efficiency", "10x Better", MetricIcon.zap),
                ("Market Fit", "Proven", MetricIcon.target),
            ),
        }),
        (SectionKey.market, {
            "title": "Market Opportunity",
            "content": f"{company} operates in a large and growing market with significant disruption potential.",
            "image_label": "Market Opportunity",
            "image_prompt": f"Market size and opportunity visualization for {company}'s industry",
            "metrics": _metrics(
                ("TAM", "$50B+", MetricIcon.dollar_sign),
                ("Growth Rate", "25% CAGR", MetricIcon.trending_up),
                ("Customers", "Millions", MetricIcon.users),
                ("Penetration", "Early", MetricIcon.target),
            ),
        }),
        (SectionKey.business_model, {
            "title": f"{company}'s Business Model",
            "content": "Sustainable revenue model with multiple monetization streams and high margins.",
            "image_label": "Business Model",
            "image_prompt": f"Business model and revenue streams visualization for {company}",
            "metrics": _metrics(
                ("Revenue Streams", "Multiple", MetricIcon.dollar_sign),
                ("Margins", "High", MetricIcon.trending_up),
                ("Scalability", "Excellent", MetricIcon.rocket),
                ("Predictability", "Strong", MetricIcon.shield),
            ),
        }),
    ]


def _add_topic_slide(deck: _DeckBuilder, sentences: list[str], topic: dict) -> None:
    deck.add(
        type=SlideType.content,
        title=topic["title"],
        content=topic["content"],
        bullet_points=sentences[:MAX_BULLET_POINTS],
        image_url=placeholder_image_url(topic["image_label"]),
        image_prompt=topic["image_prompt"],
        metrics=topic["metrics"],
    )


def _traction_metrics(content: BusinessContent) -> list[SlideMetric]:
    users = content.first_metric(MetricType.users)
    revenue = content.first_metric(MetricType.revenue)
    traction = content.first_metric(MetricType.traction)
    return _metrics(
        ("Users", f"{format_number(users.value)}+" if users else "Growing", MetricIcon.users),
        ("Revenue", f"${revenue.value / 1_000_000:.1f}M" if revenue else "Scaling", MetricIcon.dollar_sign),
        ("Traction", f"{format_number(traction.value)}+" if traction else "Strong", MetricIcon.trending_up),
        ("Retention", "High", MetricIcon.shield),
    )


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def build_structured_deck(content: BusinessContent) -> list[SlideRecord]:
    """Map extracted business content onto the canonical slide skeleton."""
    profile = content.profile
    company = profile.company_name
    deck = _DeckBuilder()

    deck.add(type=SlideType.intro, title=INTRO_TITLE, content="Investor Presentation")
    deck.add(
        type=SlideType.title,
        title=company,
        content="Transforming Industries Through Innovation",
        image_url=placeholder_image_url(company),
        image_prompt=f"Company logo and branding for {company}",
    )

    for key, topic in _topic_slides(company):
        sentences = profile.section(key)
        if sentences:
            _add_topic_slide(deck, sentences, topic)

    traction = profile.section(SectionKey.traction)
    if traction or content.metrics:
        deck.add(
            type=SlideType.content,
            title=f"{company}'s Traction & Growth",
            content="Strong momentum with proven market validation and accelerating customer adoption.",
            bullet_points=traction[:MAX_BULLET_POINTS],
            image_url=placeholder_image_url("Traction Growth"),
            image_prompt=f"Growth metrics and traction visualization for {company}",
            metrics=_traction_metrics(content),
        )
        if content.metrics:
            deck.add(
                type=SlideType.chart,
                title=f"{company}'s Growth Trajectory",
                content="Consistent growth across key metrics demonstrates strong product-market fit.",
                chart_data=synthesize_chart(content.metrics, ChartIntent.growth),
                image_prompt=f"Growth chart and metrics for {company}",
            )

    competition = profile.section(SectionKey.competition)
    if competition:
        deck.add(
            type=SlideType.content,
            title="Competitive Advantage",
            content=f"{company} maintains clear differentiation and sustainable competitive moats.",
            bullet_points=competition[:MAX_BULLET_POINTS],
            image_url=placeholder_image_url("Competitive Advantage"),
            image_prompt=f"Competitive landscape and differentiation for {company}",
            metrics=_metrics(
                ("Differentiation", "Strong", MetricIcon.shield),
                ("IP Protection", "Secured", MetricIcon.target),
                ("Market Position", "Leading", MetricIcon.trending_up),
                ("Barriers", "High", MetricIcon.zap),
            ),
        )

    team = profile.section(SectionKey.team)
    if profile.personnel:
        deck.add(
            type=SlideType.content,
            title=f"{company}'s Leadership Team",
            content="Experienced leadership team with proven track record and deep industry expertise.",
            bullet_points=[f"{p.name} - {p.role}" for p in profile.personnel],
            image_url=placeholder_image_url("Leadership Team"),
            image_prompt=f"Professional team photo and leadership overview for {company}",
            metrics=_metrics(
                ("Team Size", str(len(profile.personnel)), MetricIcon.users),
                ("Experience", "20+ Years", MetricIcon.shield),
                ("Expertise", "Deep Domain", MetricIcon.target),
                ("Track Record", "Proven", MetricIcon.rocket),
            ),
        )
    elif team:
        deck.add(
            type=SlideType.content,
            title=f"{company}'s Team",
            content="Experienced team with deep expertise and proven success in the industry.",
            bullet_points=team[:MAX_BULLET_POINTS],
            image_url=placeholder_image_url("Team"),
            image_prompt=f"Team overview and expertise for {company}",
        )

    deck.add(
        type=SlideType.chart,
        title=f"{company}'s Financial Projections",
        content="Conservative projections showing clear path to profitability and sustainable growth.",
        chart_data=synthesize_chart(content.metrics, ChartIntent.financial),
        image_prompt=f"Financial projections and revenue growth for {company}",
    )

    funding = profile.section(SectionKey.funding)
    if funding:
        deck.add(
            type=SlideType.content,
            title="Investment Opportunity",
            content=f"{company} seeks strategic investment to accelerate growth and market expansion.",
            bullet_points=funding[:MAX_BULLET_POINTS],
            image_url=placeholder_image_url("Investment Opportunity"),
            image_prompt=f"Investment opportunity and funding use for {company}",
            metrics=_metrics(
                ("Funding Goal", "$5M", MetricIcon.dollar_sign),
                ("Use of Funds", "Growth", MetricIcon.trending_up),
                ("Timeline", "18 Months", MetricIcon.target),
                ("Expected ROI", "10x+", MetricIcon.rocket),
            ),
        )

    deck.add(
        type=SlideType.image,
        title="Thank You",
        content=(
            f"Ready to transform the industry with {company}. "
            "Let's discuss how we can create exceptional value together."
        ),
        image_url=placeholder_image_url("Thank You"),
        image_prompt=f"Thank you slide with {company} branding and contact information",
        metrics=_metrics(
            ("Company", company, MetricIcon.globe),
            ("Next Steps", "Partnership", MetricIcon.rocket),
            ("Vision", "Industry Leader", MetricIcon.target),
            ("Opportunity", "Exceptional", MetricIcon.trending_up),
        ),
    )

    return deck.slides
