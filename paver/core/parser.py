"""
Markdown 解析器模块 - 将 PAVED 文档解析为章节模型

使用 markdown-it-py 进行 token 解析：
- 每个标题（任意级别）开始一个新章节，记录其行号（从1开始）
- 标题之后、下一个标题之前的围栏代码块归属该章节
- 代码块在构造时即完成可执行性分类
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from markdown_it import MarkdownIt

from paver.core.classifier import is_executable_block, normalize_language


class DocumentDecodeError(ValueError):
    """文档内容无法按 UTF-8 解码"""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot decode {path} as UTF-8: {reason}")


@dataclass(frozen=True)
class CodeBlock:
    """
    围栏代码块

    Attributes:
        language: 语言标记（信息字符串的第一个单词），可能为 None
        content: 围栏内的原始内容
        line_number: 起始围栏所在行号（从1开始）
        is_executable: 由 (language, content) 推导，构造后不可变
    """
    language: Optional[str]
    content: str
    line_number: int = 1
    is_executable: bool = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "is_executable", is_executable_block(self.language, self.content)
        )


@dataclass(frozen=True)
class Section:
    """
    文档章节

    Attributes:
        name: 标题文本（如 "Verification"）
        level: 标题级别 (1-6)
        start_line: 标题所在行号（从1开始）
        code_blocks: 章节内的代码块，按出现顺序
        content: 标题与下一个标题之间的原始正文
    """
    name: str
    level: int
    start_line: int
    code_blocks: tuple[CodeBlock, ...] = ()
    content: str = ""


@dataclass(frozen=True)
class ParsedDoc:
    """
    解析后的文档

    Attributes:
        path: 文档路径（仅用于归属）
        sections: 按出现顺序排列的章节
    """
    path: Path
    sections: tuple[Section, ...] = ()

    def get_section(self, name: str) -> Optional[Section]:
        """按标题文本精确查找（区分大小写），返回第一个匹配"""
        for section in self.sections:
            if section.name == name:
                return section
        return None

    @property
    def section_names(self) -> list[str]:
        return [section.name for section in self.sections]


def _decode(path: Path, text: Union[str, bytes]) -> str:
    if isinstance(text, bytes):
        try:
            return text.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise DocumentDecodeError(path, str(e)) from e
    return text.removeprefix("\ufeff")


def _split_lines(text: str) -> list[str]:
    # markdown-it 按 \n 计行，这里保持一致
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def parse_document(path: Union[str, Path], text: Union[str, bytes]) -> ParsedDoc:
    """
    解析 PAVED 文档

    格式错误的 Markdown 不会失败，只会得到退化的章节列表。
    第一个标题之前的内容不属于任何章节。

    Args:
        path: 文档路径
        text: 文档内容（str 或 UTF-8 编码的 bytes）

    Returns:
        ParsedDoc 对象

    Raises:
        DocumentDecodeError: bytes 内容不是合法的 UTF-8
    """
    path = Path(path)
    content = _decode(path, text)
    lines = _split_lines(content)

    tokens = MarkdownIt().parse(content)

    # (level, name, 标题起始行, 标题结束行)，行号从0开始
    headings: list[tuple[int, str, int, int]] = []
    # (信息字符串, 内容, 起始行)
    fences: list[tuple[str, str, int]] = []

    for i, token in enumerate(tokens):
        if token.type == "heading_open" and token.map:
            name = ""
            if i + 1 < len(tokens) and tokens[i + 1].type == "inline":
                name = tokens[i + 1].content or ""
            headings.append((int(token.tag[1]), name, token.map[0], token.map[1]))
        elif token.type == "fence" and token.map:
            fences.append((token.info, token.content, token.map[0]))

    sections: list[Section] = []
    for idx, (level, name, start, end) in enumerate(headings):
        body_end = headings[idx + 1][2] if idx + 1 < len(headings) else len(lines)
        code_blocks = tuple(
            CodeBlock(
                language=normalize_language(info),
                content=block_content,
                line_number=fence_line + 1,
            )
            for info, block_content, fence_line in fences
            if end <= fence_line < body_end
        )
        sections.append(Section(
            name=name,
            level=level,
            start_line=start + 1,
            code_blocks=code_blocks,
            content="\n".join(lines[end:body_end]),
        ))

    return ParsedDoc(path=path, sections=tuple(sections))


def load_document(path: Union[str, Path]) -> ParsedDoc:
    """
    读取并解析文档文件

    Raises:
        OSError: 文件无法读取
        DocumentDecodeError: 内容不是合法的 UTF-8
    """
    path = Path(path)
    return parse_document(path, path.read_bytes())
