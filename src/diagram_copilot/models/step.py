"""Tagged union over the step shapes."""

from __future__ import annotations

from typing import Annotated, TypeAlias, Union

from pydantic import Field

from diagram_copilot.models.decision_step import DecisionStep
from diagram_copilot.models.plain_step import PlainStep

Step: TypeAlias = Annotated[Union[PlainStep, DecisionStep], Field(discriminator="kind")]
