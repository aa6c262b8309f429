"""Immutable fluent elements: every setter returns a new object."""

from etiqueta import A, Div, Img, InlineTag, Input, Span

card = Div.tag().class_("card").id("profile")
avatar = Img.tag().add_attribute("src", "/avatar.png").add_attribute("alt", "Avatar")
name = Span.tag().class_("name").content("Ada <Lovelace>")
link = A.tag().add_attribute("href", "/ada").content("Profile").prefix("See").suffix("page")
email = Input.tag().id("email").type("email").prefix("Email").prefix_tag(InlineTag.LABEL)

print(card.html(avatar, "\n", name, "\n", link, "\n", email).render())
print()
print(card.render())  # unchanged
