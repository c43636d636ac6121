"""
Transaction signer interface.

Defines the wallet-facing signing API. Every intent has its own method so
callers never dispatch on transaction kind themselves; all of them funnel
into ``sign_transaction``.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Union

from ..transactions import (
    BridgeTransactionUnsigned,
    DelegateTransactionUnsigned,
    MsgDepositTransactionUnsigned,
    NFTDenomIssueUnsigned,
    NFTMintUnsigned,
    NFTTransferUnsigned,
    RedelegateTransactionUnsigned,
    RestakeStakingAllRewardsTransactionUnsigned,
    RestakeStakingRewardTransactionUnsigned,
    TextProposalTransactionUnsigned,
    TransactionUnsigned,
    TransferTransactionUnsigned,
    UndelegateTransactionUnsigned,
    VoteTransactionUnsigned,
    WithdrawAllStakingRewardsUnsigned,
    WithdrawStakingRewardUnsigned,
)

GasLimit = Union[int, str]


class TransactionSigner(ABC):
    """
    Base transaction signer.

    Subclasses implement ``sign_transaction``; the per-intent methods are
    typed entry points onto it.
    """

    @abstractmethod
    async def sign_transaction(
        self,
        transaction: TransactionUnsigned,
        phrase: str,
        gas_fee: str,
        gas_limit: GasLimit,
    ) -> str:
        """
        Sign an unsigned transaction.

        Args:
            transaction: Unsigned transaction of any supported kind
            phrase: Wallet secret; unused by signers that hold no key material
            gas_fee: Fee in base units of the chain's fee denomination
            gas_limit: Gas limit

        Returns:
            Lowercase hex of the signed transaction, ready for broadcast

        Raises:
            ValidationError: If the transaction, fee or gas limit is malformed
            UnsupportedSchemeError: If the asset's chain cannot be signed for
            EncodingError: If a message cannot be encoded for the chain
            SignerError: If the signer fails or returns an invalid signature
        """
        pass

    async def sign_transfer(self, transaction: TransferTransactionUnsigned, phrase: str,
                            gas_fee: str, gas_limit: GasLimit) -> str:
        return await self.sign_transaction(transaction, phrase, gas_fee, gas_limit)

    async def sign_vote_transaction(self, transaction: VoteTransactionUnsigned, phrase: str,
                                    gas_fee: str, gas_limit: GasLimit) -> str:
        return await self.sign_transaction(transaction, phrase, gas_fee, gas_limit)

    async def sign_proposal_deposit_transaction(self, transaction: MsgDepositTransactionUnsigned, phrase: str,
                                                gas_fee: str, gas_limit: GasLimit) -> str:
        return await self.sign_transaction(transaction, phrase, gas_fee, gas_limit)

    async def sign_submit_text_proposal_transaction(self, transaction: TextProposalTransactionUnsigned,
                                                    phrase: str, gas_fee: str, gas_limit: GasLimit) -> str:
        return await self.sign_transaction(transaction, phrase, gas_fee, gas_limit)

    async def sign_delegate_tx(self, transaction: DelegateTransactionUnsigned, phrase: str,
                               gas_fee: str, gas_limit: GasLimit) -> str:
        return await self.sign_transaction(transaction, phrase, gas_fee, gas_limit)

    async def sign_restake_staking_reward_tx(self, transaction: RestakeStakingRewardTransactionUnsigned,
                                             phrase: str, gas_fee: str, gas_limit: GasLimit) -> str:
        """Withdraw the reward from one validator and delegate it back in one transaction."""
        return await self.sign_transaction(transaction, phrase, gas_fee, gas_limit)

    async def sign_restake_all_staking_rewards_tx(self, transaction: RestakeStakingAllRewardsTransactionUnsigned,
                                                  phrase: str, gas_fee: str, gas_limit: GasLimit) -> str:
        """Withdraw every listed reward, then delegate each amount back to its validator."""
        return await self.sign_transaction(transaction, phrase, gas_fee, gas_limit)

    async def sign_withdraw_staking_reward_tx(self, transaction: WithdrawStakingRewardUnsigned, phrase: str,
                                              gas_fee: str, gas_limit: GasLimit) -> str:
        return await self.sign_transaction(transaction, phrase, gas_fee, gas_limit)

    async def sign_withdraw_all_staking_rewards_tx(self, transaction: WithdrawAllStakingRewardsUnsigned,
                                                   phrase: str, gas_fee: str, gas_limit: GasLimit) -> str:
        return await self.sign_transaction(transaction, phrase, gas_fee, gas_limit)

    async def sign_undelegate_tx(self, transaction: UndelegateTransactionUnsigned, phrase: str,
                                 gas_fee: str, gas_limit: GasLimit) -> str:
        return await self.sign_transaction(transaction, phrase, gas_fee, gas_limit)

    async def sign_redelegate_tx(self, transaction: RedelegateTransactionUnsigned, phrase: str,
                                 gas_fee: str, gas_limit: GasLimit) -> str:
        return await self.sign_transaction(transaction, phrase, gas_fee, gas_limit)

    async def sign_nft_transfer(self, transaction: NFTTransferUnsigned, phrase: str,
                                gas_fee: str, gas_limit: GasLimit) -> str:
        return await self.sign_transaction(transaction, phrase, gas_fee, gas_limit)

    async def sign_nft_mint(self, transaction: NFTMintUnsigned, phrase: str,
                            gas_fee: str, gas_limit: GasLimit) -> str:
        return await self.sign_transaction(transaction, phrase, gas_fee, gas_limit)

    async def sign_nft_denom_issue(self, transaction: NFTDenomIssueUnsigned, phrase: str,
                                   gas_fee: str, gas_limit: GasLimit) -> str:
        return await self.sign_transaction(transaction, phrase, gas_fee, gas_limit)

    async def sign_ibc_transfer(self, transaction: BridgeTransactionUnsigned, phrase: str,
                                gas_fee: str, gas_limit: GasLimit) -> str:
        """IBC transfer; the origin asset's chain decides the signing scheme."""
        return await self.sign_transaction(transaction, phrase, gas_fee, gas_limit)


__all__ = [
    "GasLimit",
    "TransactionSigner",
]
