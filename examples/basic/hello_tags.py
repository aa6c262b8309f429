"""Build markup in 3 lines: plain functions, no objects required."""

from etiqueta import create_tag

html = create_tag("div", create_tag("strong", "Hello World"), {"class": "greeting"})
print(html)
