"""Free-threading safe: begin/end pairing is isolated per thread."""

from concurrent.futures import ThreadPoolExecutor

from etiqueta import Div, Section


def render_page(i: int) -> str:
    html = Section.tag().id(f"page-{i}").begin()
    html += Div.tag().content(f"Content for page {i}").render()
    return html + Section.end()


with ThreadPoolExecutor(max_workers=8) as ex:
    pages = list(ex.map(render_page, range(1000)))

print(f"Rendered {len(pages)} pages in parallel")
print(pages[0])
