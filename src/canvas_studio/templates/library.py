"""
Layout Templates
Pre-built component layouts for quick-start designs
"""

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field

from ..domain.components import (
    ButtonSize,
    ButtonVariant,
    CanvasComponent,
    ComponentBase,
    FlexDirection,
    FlexLayout,
    GridLayout,
    InputType,
    Spacing,
    TextStyle,
    TextTag,
)
from ..domain.factory import button, container, heading, input_, text
from ..engine.tree import duplicate


class TemplateCategory(str, Enum):
    LANDING_PAGE = "landing_page"
    DASHBOARD = "dashboard"
    FORM = "form"
    NAVIGATION = "navigation"
    CARD = "card"
    HERO = "hero"
    FOOTER = "footer"
    CUSTOM = "custom"


class Template(BaseModel):
    """Layout template definition"""
    id: str
    name: str
    description: str
    category: TemplateCategory
    components: List[CanvasComponent]
    tags: List[str] = Field(default_factory=list)
    thumbnail: str | None = None

    def instantiate(self) -> List[ComponentBase]:
        """Copies of the template's components with freshly minted ids"""
        return [duplicate(component) for component in self.components]


def _padding(vertical: int, horizontal: int | None = None) -> Spacing:
    horizontal = vertical if horizontal is None else horizontal
    return Spacing(top=vertical, right=horizontal, bottom=vertical, left=horizontal)


def _column(*children: ComponentBase, gap: int, padding: Spacing | None = None) -> ComponentBase:
    return container(
        *children,
        layout=FlexLayout(direction=FlexDirection.COLUMN),
        gap=gap,
        padding=padding or Spacing(),
    )


def _row(*children: ComponentBase, gap: int, padding: Spacing | None = None, wrap: bool = False) -> ComponentBase:
    return container(
        *children,
        layout=FlexLayout(direction=FlexDirection.ROW, wrap=wrap),
        gap=gap,
        padding=padding or Spacing(),
    )


def _login_form() -> Template:
    form = _column(
        heading("Login", 1),
        input_("Email address", input_type=InputType.EMAIL, required=True),
        input_("Password", input_type=InputType.PASSWORD, required=True),
        button("Sign In", variant=ButtonVariant.PRIMARY, size=ButtonSize.LARGE),
        text("Forgot your password?"),
        gap=16,
        padding=_padding(32),
    )
    return Template(
        id="login-form",
        name="Login Form",
        description="A clean login form with email and password fields",
        category=TemplateCategory.FORM,
        components=[form],
        tags=["login", "auth", "form", "email", "password"],
    )


def _contact_form() -> Template:
    form = _column(
        heading("Contact Us", 2),
        input_("Your name", required=True),
        input_("Email address", input_type=InputType.EMAIL, required=True),
        input_("Phone number (optional)", input_type=InputType.TEL),
        button("Send Message"),
        gap=12,
        padding=_padding(24),
    )
    return Template(
        id="contact-form",
        name="Contact Form",
        description="A simple contact form with name, email, and phone fields",
        category=TemplateCategory.FORM,
        components=[form],
        tags=["contact", "form", "email", "phone"],
    )


def _hero_section() -> Template:
    actions = _row(
        button("Get Started", size=ButtonSize.LARGE),
        button("Learn More", variant=ButtonVariant.OUTLINE, size=ButtonSize.LARGE),
        gap=12,
    )
    hero = _column(
        heading("Build Amazing UIs", 1),
        text("Create beautiful, reactive web applications in minutes"),
        actions,
        gap=24,
        padding=_padding(64, 32),
    )
    return Template(
        id="hero-section",
        name="Hero Section",
        description="A hero section with headline, subtitle, and CTA buttons",
        category=TemplateCategory.HERO,
        components=[hero],
        tags=["hero", "landing", "headline", "cta"],
    )


def _pricing_card() -> Template:
    card = _column(
        heading("Pro Plan", 2),
        text("$29/month", style=TextStyle.HEADING1, tag=TextTag.SPAN),
        text("✓ Unlimited projects"),
        text("✓ Priority support"),
        text("✓ Advanced analytics"),
        text("✓ Custom branding"),
        button("Subscribe", size=ButtonSize.LARGE),
        gap=16,
        padding=_padding(24),
    )
    return Template(
        id="pricing-card",
        name="Pricing Card",
        description="A pricing card with plan details and features",
        category=TemplateCategory.CARD,
        components=[card],
        tags=["pricing", "card", "subscription", "features"],
    )


def _navigation_bar() -> Template:
    nav = _row(
        text("Brand", style=TextStyle.HEADING2, tag=TextTag.SPAN),
        text("Home"),
        text("About"),
        text("Services"),
        text("Contact"),
        button("Sign Up"),
        gap=24,
        padding=_padding(16, 24),
    )
    return Template(
        id="navigation-bar",
        name="Navigation Bar",
        description="A horizontal navigation bar with links and CTA",
        category=TemplateCategory.NAVIGATION,
        components=[nav],
        tags=["navbar", "navigation", "header", "menu"],
    )


def _footer() -> Template:
    def section(title: str, *links: str) -> ComponentBase:
        return _column(
            text(title, style=TextStyle.HEADING3),
            *(text(link) for link in links),
            gap=8,
        )

    footer = _row(
        section("Company", "About", "Careers", "Press"),
        section("Resources", "Documentation", "Blog", "Support"),
        text("© 2024 Your Company. All rights reserved.", style=TextStyle.CAPTION),
        gap=32,
        padding=_padding(32),
        wrap=True,
    )
    return Template(
        id="footer",
        name="Footer",
        description="A multi-column footer with links and copyright",
        category=TemplateCategory.FOOTER,
        components=[footer],
        tags=["footer", "links", "copyright"],
    )


def _dashboard_header() -> Template:
    header = _row(
        heading("Dashboard", 1),
        input_("Search..."),
        button("+ Add New"),
        button("⚙ Settings", variant=ButtonVariant.GHOST),
        gap=16,
        padding=_padding(16, 24),
    )
    return Template(
        id="dashboard-header",
        name="Dashboard Header",
        description="A dashboard header with search and action buttons",
        category=TemplateCategory.DASHBOARD,
        components=[header],
        tags=["dashboard", "header", "search", "actions"],
    )


FEATURES = [
    ("🚀", "Fast Performance", "Lightning-fast rendering"),
    ("🔒", "Secure", "Built-in security features"),
    ("📱", "Responsive", "Works on all devices"),
    ("⚡", "Real-time", "Live updates and sync"),
    ("🎨", "Customizable", "Easy to customize"),
    ("📊", "Analytics", "Built-in analytics"),
]


def _feature_grid() -> Template:
    cards = [
        _column(
            text(icon, style=TextStyle.HEADING1),
            heading(title, 3),
            text(description),
            gap=8,
            padding=_padding(16),
        )
        for icon, title, description in FEATURES
    ]
    grid = container(
        *cards,
        layout=GridLayout(columns=3, rows=2),
        gap=24,
        padding=_padding(32),
    )
    return Template(
        id="feature-grid",
        name="Feature Grid",
        description="A 3x2 grid of feature cards with icons",
        category=TemplateCategory.LANDING_PAGE,
        components=[grid],
        tags=["features", "grid", "cards", "landing"],
    )


class TemplateLibrary:
    """Library of layout templates"""

    TEMPLATES: Dict[str, Template] = {
        template.id: template
        for template in (
            _login_form(),
            _contact_form(),
            _hero_section(),
            _pricing_card(),
            _navigation_bar(),
            _footer(),
            _dashboard_header(),
            _feature_grid(),
        )
    }

    @classmethod
    def get(cls, template_id: str) -> Template | None:
        """Get template by ID"""
        return cls.TEMPLATES.get(template_id)

    @classmethod
    def list_all(cls) -> List[Template]:
        """List all templates"""
        return list(cls.TEMPLATES.values())

    @classmethod
    def by_category(cls, category: TemplateCategory) -> List[Template]:
        return [t for t in cls.TEMPLATES.values() if t.category == category]

    @classmethod
    def search(cls, query: str) -> List[Template]:
        """Search templates by name, description or tag"""
        query_lower = query.lower()
        results = []

        for template in cls.TEMPLATES.values():
            if (query_lower in template.name.lower() or
                query_lower in template.description.lower() or
                any(query_lower in tag.lower() for tag in template.tags)):
                results.append(template)

        return results
