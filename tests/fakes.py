# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class ScriptedConfirm:
    """
    Fake ConfirmPrompt.

    - Records every prompt it was asked
    - Answers from a scripted list (declines once the script runs out)
    """

    answers: list[bool] = field(default_factory=list)
    prompts: list[str] = field(default_factory=list)

    def __call__(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        if not self.answers:
            return False
        return self.answers.pop(0)
