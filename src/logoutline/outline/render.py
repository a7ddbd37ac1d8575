"""Rendered view of a log document with navigable block anchors.

Each ``<pre>`` that starts a job block gets ``id="b_<start>"`` where
``<start>`` is the block's offset in the *original* document, i.e. the same
value a :class:`~logoutline.core.contracts.messages.HighlightMessage` carries.
A viewer receiving ``{"command": "highlight", "start": 120, ...}`` can then
scroll to ``#b_120`` and select the block's first non-blank line.
"""

from __future__ import annotations

from html import escape

from logoutline.parsing.extractor import ExtractOptions, extract_blocks
from logoutline.parsing.preprocess import preprocess

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{title}</title>
<style>
pre {{ white-space: pre-wrap; }}
.logoutline-highlight {{ outline: 2px solid Highlight; }}
</style>
</head>
<body>
{body}
<script>
function selectTitleLine(el) {{
  const selection = window.getSelection();
  selection.removeAllRanges();
  const range = document.createRange();
  const textNode = Array.from(el.childNodes).find(n => n.nodeType === Node.TEXT_NODE);
  if (!textNode) {{
    range.selectNode(el);
    selection.addRange(range);
    return;
  }}
  const text = textNode.textContent;
  let start = 0;
  while (start < text.length) {{
    const newline = text.indexOf('\\n', start);
    const lineEnd = newline === -1 ? text.length : newline;
    if (text.substring(start, lineEnd).trim().length > 0) {{
      range.setStart(textNode, start);
      range.setEnd(textNode, lineEnd);
      selection.addRange(range);
      return;
    }}
    start = lineEnd + 1;
  }}
}}

window.addEventListener('message', event => {{
  const message = event.data;
  if (!message || message.command !== 'highlight') {{ return; }}
  const el = document.getElementById('b_' + message.start);
  if (!el) {{ return; }}
  el.scrollIntoView({{ behavior: 'smooth', block: 'start' }});
  el.classList.add('logoutline-highlight');
  selectTitleLine(el);
  setTimeout(() => el.classList.remove('logoutline-highlight'), 2000);
}});
</script>
</body>
</html>
"""


def inject_anchors(text: str, *, options: ExtractOptions | None = None) -> str:
    """Return the preprocessed `text` with an anchor id on every block's ``<pre``."""
    content = preprocess(text)
    in_original = extract_blocks(content, text, options=options)
    in_content = extract_blocks(content, options=options)

    anchors = sorted(
        ((scanned.start, mapped.start) for scanned, mapped in zip(in_content, in_original)),
        reverse=True,
    )
    for offset, anchor in anchors:
        head = offset + len("<pre")
        if content[offset:head].lower() == "<pre":
            content = f'{content[:head]} id="b_{anchor}"{content[head:]}'
    return content


def render_document(
    text: str, *, title: str = "RMS Log", options: ExtractOptions | None = None
) -> str:
    """Wrap the anchored document in a standalone HTML page."""
    return _PAGE.format(title=escape(title), body=inject_anchors(text, options=options))


__all__ = ["inject_anchors", "render_document"]
