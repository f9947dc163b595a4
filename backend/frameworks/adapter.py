"""
Framework adapter: page id -> placeholder component source.

Output is plain string templating. The component body is empty; rendering
sections into markup is left to the front end.
"""

from dataclasses import dataclass
from enum import Enum
import re


class FrameworkType(Enum):
    VITE = "vite"      # bundler-based React app
    REACT = "react"    # plain React library
    NEXT = "next"      # Next.js pages router


@dataclass
class FrameworkConfig:
    framework: FrameworkType
    build_command: str
    dev_command: str
    output_dir: str
    public_dir: str
    source_dir: str
    entry_point: str


@dataclass
class ExportConfig:
    """
    Export options.

    include_styles, minify and source_map are accepted but do not change
    the generated code yet.
    """
    format: str = "tsx"  # "jsx", "tsx" or "html"
    include_styles: bool = False
    minify: bool = False
    source_map: bool = False


FRAMEWORK_CONFIGS = {
    FrameworkType.VITE: FrameworkConfig(
        framework=FrameworkType.VITE,
        build_command="vite build",
        dev_command="vite",
        output_dir="dist",
        public_dir="public",
        source_dir="src",
        entry_point="src/main.tsx",
    ),
    FrameworkType.REACT: FrameworkConfig(
        framework=FrameworkType.REACT,
        build_command="vite build",
        dev_command="vite",
        output_dir="dist",
        public_dir="public",
        source_dir="src",
        entry_point="src/App.tsx",
    ),
    FrameworkType.NEXT: FrameworkConfig(
        framework=FrameworkType.NEXT,
        build_command="next build",
        dev_command="next dev",
        output_dir=".next",
        public_dir="public",
        source_dir="pages",
        entry_point="pages/_app.tsx",
    ),
}

REACT_COMPONENT = """import React from 'react';

export const {name}: React.FC = () => {{
  return (
    <div className="page-{page_id}">
      {{/* Page content for {page_id} */}}
    </div>
  );
}};

export default {name};"""

NEXT_PAGE = """import type {{ NextPage }} from 'next';

const Page: NextPage = () => {{
  return (
    <div className="page-{page_id}">
      {{/* Page content for {page_id} */}}
    </div>
  );
}};

export default Page;"""


def to_pascal_case(value: str) -> str:
    """'page_123-about' -> 'Page123About'"""
    return "".join(word[:1].upper() + word[1:] for word in re.split(r"[-_]", value))


class FrameworkAdapter:
    """Generates component source for one target framework."""

    def __init__(self, framework: FrameworkType):
        self.framework = FrameworkType(framework)
        self.config = FRAMEWORK_CONFIGS[self.framework]

    def export_page_as_component(self, page_id: str, export_config: ExportConfig = None) -> str:
        # TODO: honour export_config.include_styles once sections are rendered into the body
        if self.framework is FrameworkType.NEXT:
            return NEXT_PAGE.format(page_id=page_id)
        return REACT_COMPONENT.format(name=to_pascal_case(page_id), page_id=page_id)
