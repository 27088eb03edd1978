"""Configuración de pytest y fixtures compartidas."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest
from loguru import logger

from tfplan.core.plan import TerraformPlan, build_models
from tfplan.core.plan.models import ResourceChangeModel


def resource(address: str, actions: List[str], before: Any = None, after: Any = None) -> Dict[str, Any]:
    """Entrada de resource_changes con el formato de terraform show -json."""
    return {
        "address": address,
        "type": address.split(".")[0],
        "change": {"actions": actions, "before": before, "after": after},
    }


@pytest.fixture(autouse=True)
def _silence_logger():
    """Sin sinks de loguru durante los tests (setup_logger los reemplaza si se invoca)."""
    logger.remove()
    yield
    logger.remove()


@pytest.fixture
def plan_data() -> Dict[str, Any]:
    """Plan con un create y un update."""
    return {
        "format_version": "1.2",
        "terraform_version": "1.7.5",
        "resource_changes": [
            resource(
                "aws_instance.web",
                ["create"],
                after={"ami": "ami-12345678", "instance_type": "t3.micro"},
            ),
            resource(
                "aws_s3_bucket.data",
                ["update"],
                before={"encryption": None, "versioning": False},
                after={"encryption": "AES256", "versioning": True},
            ),
        ],
    }


@pytest.fixture
def plan(plan_data: Dict[str, Any]) -> TerraformPlan:
    return TerraformPlan.model_validate(plan_data)


@pytest.fixture
def models(plan: TerraformPlan) -> List[ResourceChangeModel]:
    return build_models(plan)


@pytest.fixture
def plan_file(tmp_path: Path, plan_data: Dict[str, Any]) -> Path:
    path = tmp_path / "plan.json"
    path.write_text(json.dumps(plan_data), encoding="utf-8")
    return path
