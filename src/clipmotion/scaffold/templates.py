"""File templates for `clipmotion create`."""

from clipmotion.models.registry import Contributor, Framework


def pascal_case(name: str) -> str:
    return "".join(word[:1].upper() + word[1:] for word in name.split("-"))


def component_extension(framework: Framework) -> str:
    return ".vue" if framework == "vue" else ".tsx"


def doc_block(
    *,
    description: str,
    category: str,
    difficulty: str,
    source: str | None,
    contributor: Contributor | None,
) -> str:
    """The `/** ... */` block the registry builder reads metadata from."""
    tags = [
        ("description", description),
        ("category", category),
        ("difficulty", difficulty),
        ("source", source),
    ]
    if contributor is not None:
        tags.extend(
            [
                ("author", contributor.name),
                ("github", contributor.github),
                ("x", contributor.x),
                ("website", contributor.website),
            ]
        )

    lines = ["/**"]
    lines.extend(f" * @{tag} {value}" for tag, value in tags if value)
    lines.append(" */")
    return "\n".join(lines)


def component_template(name: str, framework: Framework, doc: str) -> str:
    pascal = pascal_case(name)

    if framework == "vue":
        return f"""<script setup lang="ts">
{doc}

interface Props {{
  class?: string;
}}

defineProps<Props>();
</script>

<template>
  <div :class="$props.class">
    <!-- Animation markup -->
    <p>Your animation here</p>
  </div>
</template>

<style scoped>
/* Component styles */
</style>
"""

    if framework == "angular":
        return f"""import {{ Component, Input }} from "@angular/core";

{doc}
@Component({{
  selector: "app-{name}",
  standalone: true,
  template: `
    <div [class]="className">
      <p>Your animation here</p>
    </div>
  `,
}})
export class {pascal}Component {{
  @Input() className?: string;
}}
"""

    directive = '"use client";\n\n' if framework == "nextjs" else ""
    return f"""{directive}import React from "react";
// Shared helpers such as cn() are importable from "@/components/utils"

{doc}

interface {pascal}Props {{
  className?: string;
}}

export function {pascal}({{ className }}: {pascal}Props) {{
  return (
    <div className={{className}}>
      <p>Your animation here</p>
    </div>
  );
}}
"""


def readme_template(name: str, description: str, difficulty: str, source: str | None) -> str:
    pascal = pascal_case(name)
    demo = f"**Source video:** {source}" if source else "Add a demo GIF or video here."
    return f"""# {pascal}

{description}

## Demo

{demo}

## Installation

```bash
clipmotion add {name}
```

## Usage

```tsx
import {{ {pascal} }} from "@/components/{name}";

export default function Example() {{
  return <{pascal} />;
}}
```

## Props

| Prop | Type | Default | Description |
|------|------|---------|-------------|
| className | string | - | Additional CSS classes |

## Difficulty

{difficulty}
"""


def example_template(name: str, framework: Framework) -> str:
    pascal = pascal_case(name)
    if framework == "vue":
        return f"""<script setup lang="ts">
import {pascal} from "../ui/{name}.vue";
</script>

<template>
  <div class="example-container">
    <{pascal} />
  </div>
</template>
"""
    return f"""import React from "react";
import {{ {pascal} }} from "../ui/{name}";

export default function {pascal}Example() {{
  return (
    <div className="example-container">
      <{pascal} />
    </div>
  );
}}
"""


CONTRIBUTING_GUIDE = """# Contributing Your Component

1. Implement the animation in `ui/<name>`, using the source video as reference.
2. Keep the doc-comment tags at the top of the file up to date; the registry
   build reads description, category, difficulty, source and credits from them.
3. Add a realistic usage example under `examples/`.
4. Build the registry and check the generated JSON:

   ```bash
   clipmotion registry:build
   ```

5. Open a pull request linking the source video.

## File Structure

```
registry/<framework>/
├── ui/          # Component sources
├── lib/         # Shared utilities
├── hooks/       # Shared hooks
└── examples/    # Usage examples
```
"""
