# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from typing import Dict

from ..utils.draft_version import Draft
from .base import BaseDraftValidator
from .draft3 import Draft3Validator
from .draft4 import Draft4Validator


class ValidatorFactory:
    """Factory for creating draft validators."""

    _validators = {
        Draft.DRAFT3: Draft3Validator,
        Draft.DRAFT4: Draft4Validator,
    }

    @classmethod
    def all_validators(cls) -> Dict[Draft, BaseDraftValidator]:
        """One validator per supported draft, as used by a validation session."""
        return {draft: validator_cls() for draft, validator_cls in cls._validators.items()}
