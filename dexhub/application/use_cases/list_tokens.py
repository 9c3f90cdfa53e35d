from __future__ import annotations

from dexhub.application.dto.quote import ListTokensInput, ListTokensOutput
from dexhub.domain.registry.chains import get_chain
from dexhub.domain.registry.tokens import get_all_tokens


class ListTokensUseCase:
    def execute(self, command: ListTokensInput) -> ListTokensOutput:
        chain = get_chain(command.chain_id)
        return ListTokensOutput(chain_id=chain.id, tokens=get_all_tokens(chain.id))
