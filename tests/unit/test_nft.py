from unittest import TestCase
from soulbound.db.driver import ContractDriver
from soulbound.events import EventLog
from soulbound.contracts.nft import NFT
from soulbound.exceptions import (
    InvalidIdentity, TokenAlreadyMinted, NonexistentToken, NotTokenOwner, NotApproved, ReceiverRejected
)
from soulbound import config


class TestNFT(TestCase):
    def setUp(self):
        self.d = ContractDriver()
        self.events = EventLog()
        self.nft = NFT('nft', token_name='Credential', symbol='CRD', driver=self.d, events=self.events)
        self.d.commit()

    def test_metadata(self):
        self.assertEqual(self.nft.get_name(), 'Credential')
        self.assertEqual(self.nft.get_symbol(), 'CRD')

    def test_metadata_not_overwritten_by_second_instance(self):
        NFT('nft', token_name='Other', symbol='OTH', driver=self.d, events=self.events)
        self.assertEqual(self.nft.get_name(), 'Credential')

    def test_mint(self):
        self.nft.mint('alice', 1)

        self.assertTrue(self.nft.exists(1))
        self.assertEqual(self.nft.owner_of(1), 'alice')
        self.assertEqual(self.nft.balance_of('alice'), 1)

    def test_mint_emits_transfer_from_null(self):
        self.nft.mint('alice', 1)
        event = self.events.pending[-1]

        self.assertEqual(event.name, 'Transfer')
        self.assertEqual(event.data, {'sender': config.NULL_IDENTITY, 'to': 'alice', 'token_id': 1})

    def test_mint_twice_fails(self):
        self.nft.mint('alice', 1)
        with self.assertRaises(TokenAlreadyMinted):
            self.nft.mint('bob', 1)

        self.assertEqual(self.nft.owner_of(1), 'alice')

    def test_mint_to_null_fails(self):
        with self.assertRaises(InvalidIdentity):
            self.nft.mint(config.NULL_IDENTITY, 1)

    def test_mint_to_none_or_empty_fails(self):
        for identity in (None, ''):
            with self.assertRaises(InvalidIdentity):
                self.nft.mint(identity, 1)

        self.assertFalse(self.nft.exists(1))
        self.assertEqual(self.d.pending_writes, {})

    def test_owner_of_missing(self):
        with self.assertRaises(NonexistentToken):
            self.nft.owner_of(99)

    def test_balance_of_null(self):
        with self.assertRaises(InvalidIdentity):
            self.nft.balance_of(config.NULL_IDENTITY)

    def test_transfer_by_owner(self):
        self.nft.mint('alice', 1)
        self.nft.transfer('alice', 'alice', 'bob', 1)

        self.assertEqual(self.nft.owner_of(1), 'bob')
        self.assertEqual(self.nft.balance_of('alice'), 0)
        self.assertEqual(self.nft.balance_of('bob'), 1)

    def test_transfer_wrong_sender(self):
        self.nft.mint('alice', 1)
        with self.assertRaises(NotTokenOwner):
            self.nft.transfer('bob', 'bob', 'carol', 1)

    def test_transfer_not_approved(self):
        self.nft.mint('alice', 1)
        with self.assertRaises(NotApproved):
            self.nft.transfer('mallory', 'alice', 'mallory', 1)

    def test_transfer_missing_token(self):
        with self.assertRaises(NonexistentToken):
            self.nft.transfer('alice', 'alice', 'bob', 1)

    def test_transfer_to_null(self):
        self.nft.mint('alice', 1)
        with self.assertRaises(InvalidIdentity):
            self.nft.transfer('alice', 'alice', config.NULL_IDENTITY, 1)

    def test_transfer_to_none_fails(self):
        self.nft.mint('alice', 1)
        self.d.commit()

        with self.assertRaises(InvalidIdentity):
            self.nft.transfer('alice', 'alice', None, 1)

        self.assertEqual(self.nft.owner_of(1), 'alice')
        self.assertEqual(self.d.pending_writes, {})

    def test_balance_of_none(self):
        with self.assertRaises(InvalidIdentity):
            self.nft.balance_of(None)

    def test_approved_address_can_transfer_once(self):
        self.nft.mint('alice', 1)
        self.nft.approve('alice', 'bob', 1)
        self.assertEqual(self.nft.get_approved(1), 'bob')

        self.nft.transfer('bob', 'alice', 'carol', 1)

        self.assertEqual(self.nft.owner_of(1), 'carol')
        self.assertIsNone(self.nft.get_approved(1))

    def test_approve_by_stranger_fails(self):
        self.nft.mint('alice', 1)
        with self.assertRaises(NotApproved):
            self.nft.approve('mallory', 'mallory', 1)

    def test_operator_can_transfer_and_approve(self):
        self.nft.mint('alice', 1)
        self.nft.set_approval_for_all('alice', 'op', True)
        self.assertTrue(self.nft.is_approved_for_all('alice', 'op'))

        self.nft.approve('op', 'bob', 1)
        self.nft.transfer('op', 'alice', 'carol', 1)

        self.assertEqual(self.nft.owner_of(1), 'carol')

    def test_revoke_operator(self):
        self.nft.set_approval_for_all('alice', 'op', True)
        self.nft.set_approval_for_all('alice', 'op', False)

        self.assertFalse(self.nft.is_approved_for_all('alice', 'op'))

    def test_operator_cannot_be_self(self):
        with self.assertRaises(InvalidIdentity):
            self.nft.set_approval_for_all('alice', 'alice', True)

    def test_safe_transfer_without_hook(self):
        self.nft.mint('alice', 1)
        self.nft.safe_transfer('alice', 'alice', 'bob', 1)

        self.assertEqual(self.nft.owner_of(1), 'bob')

    def test_safe_transfer_hook_accepts(self):
        calls = []

        def hook(operator, sender, token_id, data):
            calls.append((operator, sender, token_id, data))
            return True

        self.nft.register_receiver('bob', hook)
        self.nft.mint('alice', 1)
        self.nft.safe_transfer('alice', 'alice', 'bob', 1, b'hi')

        self.assertEqual(calls, [('alice', 'alice', 1, b'hi')])

    def test_safe_transfer_hook_rejects(self):
        self.nft.register_receiver('bob', lambda *args: False)
        self.nft.mint('alice', 1)
        self.d.commit()

        with self.assertRaises(ReceiverRejected):
            self.nft.safe_transfer('alice', 'alice', 'bob', 1)

        self.assertEqual(self.nft.owner_of(1), 'alice')
        self.assertEqual(self.d.pending_writes, {})

    def test_destroy(self):
        self.nft.mint('alice', 1)
        self.nft.approve('alice', 'bob', 1)
        self.nft.destroy(1)

        self.assertFalse(self.nft.exists(1))
        self.assertEqual(self.nft.balance_of('alice'), 0)
        self.assertIsNone(self.nft.approvals[1])

        event = self.events.pending[-1]
        self.assertEqual(event.data, {'sender': 'alice', 'to': config.NULL_IDENTITY, 'token_id': 1})

    def test_destroy_missing(self):
        with self.assertRaises(NonexistentToken):
            self.nft.destroy(1)

    def test_primitives_not_exported(self):
        exported = [name for name, _ in NFT.exported_functions()]

        for primitive in ('mint', 'transfer', 'safe_transfer', 'destroy', 'register_receiver'):
            self.assertNotIn(primitive, exported)

        self.assertIn('owner_of', exported)
        self.assertIn('approve', exported)
