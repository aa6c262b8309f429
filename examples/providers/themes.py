"""Defaults and themes from a provider registry, selected per context."""

from etiqueta import (
    BaseBlock,
    Div,
    MappingDefaultsProvider,
    MappingThemeProvider,
    ProviderRegistryBuilder,
    RenderConfig,
    Span,
    render_config_context,
)

registry = (
    ProviderRegistryBuilder()
    .register_defaults(MappingDefaultsProvider({BaseBlock: {"class": "block"}}))
    .register_theme(MappingThemeProvider({"dark": {"class": "bg-dark text-light"}}))
    .build()
)

for theme in ("light", "dark"):
    with render_config_context(RenderConfig(providers=registry, theme=theme)):
        print(theme, Div.tag().html(Span.tag().content("themed")).render(), sep="\n")
