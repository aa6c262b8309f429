"""Open elements with begin(), write anything, close them with end()."""

from etiqueta import Body, Div, Html, Li, Main, Ul

html = Html.tag().lang("en").begin()
html += Body.tag().begin()
html += Main.tag().class_("container").begin()
html += Ul.tag().html(*(Li.tag().content(f"Item {i}") for i in range(3))).render()
html += Div.tag().class_("footer").content("Footer").render()
html += Main.end()
html += Body.end()
html += Html.end()
print(html)
