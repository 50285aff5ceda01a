"""Identity resolution - partner user id to storefront Customer.

The partner identifies users by its own id (``ram_user_id``). The mapping
lives in ExternalIdentity, unique on (provider, provider_uid). Unknown ids
are auto-provisioned when the caller allows it.
"""

from __future__ import annotations

import logging
import secrets
from typing import TYPE_CHECKING

from django.contrib.auth.hashers import make_password
from django.db import IntegrityError, transaction

from ramlink.conf import ramlink_settings
from ramlink.exceptions import RamlinkError
from ramlink.models import Customer, ExternalIdentity
from ramlink.signals import customer_provisioned

if TYPE_CHECKING:
    from ramlink.context import StorefrontContext

logger = logging.getLogger(__name__)


class IdentityResolver:
    """
    Maps external user ids to customers.

    Uses @classmethod for extensibility, like the other services.
    """

    @classmethod
    def resolve(cls, external_id: str, provider: str | None = None) -> Customer | None:
        """
        Find the customer linked to ``external_id``.

        Args:
            external_id: Partner user id
            provider: Provider name (defaults to RAMLINK["PROVIDER"])

        Returns:
            Customer (whatever its is_active flag), or None if there is no link
        """
        if not external_id:
            return None

        try:
            link = ExternalIdentity.objects.select_related("customer").get(
                provider=provider or ramlink_settings.PROVIDER,
                provider_uid=external_id,
            )
        except ExternalIdentity.DoesNotExist:
            return None
        return link.customer

    @classmethod
    def resolve_or_create(
        cls,
        external_id: str,
        *,
        context: StorefrontContext,
        email: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        require_email: bool = False,
    ) -> tuple[Customer, bool]:
        """
        Find the customer for ``external_id`` or provision a new one.

        Args:
            external_id: Partner user id
            context: Current storefront context (channel, group, provider)
            email: Email for a new customer (optional unless require_email)
            first_name: First name for a new customer
            last_name: Last name for a new customer
            require_email: Refuse to provision without an email

        Returns:
            Tuple of (Customer, created: bool)

        Raises:
            RamlinkError: CUSTOMER_UNRESOLVABLE when no link exists and
                provisioning is not possible
        """
        if not external_id:
            raise RamlinkError("CUSTOMER_UNRESOLVABLE", external_id=external_id)

        customer = cls.resolve(external_id, provider=context.provider)
        if customer:
            return customer, False

        if require_email and not email:
            raise RamlinkError("CUSTOMER_UNRESOLVABLE", external_id=external_id)

        try:
            with transaction.atomic():
                customer = cls._create_customer(
                    context,
                    email=email,
                    first_name=first_name,
                    last_name=last_name,
                )
                ExternalIdentity.objects.create(
                    customer=customer,
                    provider=context.provider,
                    provider_uid=external_id,
                )
        except IntegrityError:
            # A concurrent request linked this id first; our customer row was
            # rolled back with the savepoint.
            winner = cls.resolve(external_id, provider=context.provider)
            if winner is None:
                raise
            logger.info("Identity race lost for %s:%s", context.provider, external_id)
            return winner, False

        logger.info(
            "Provisioned customer %s for %s:%s", customer.pk, context.provider, external_id
        )
        customer_provisioned.send(sender=Customer, customer=customer, external_id=external_id)
        return customer, True

    @classmethod
    def _create_customer(
        cls,
        context: StorefrontContext,
        *,
        email: str | None,
        first_name: str | None,
        last_name: str | None,
    ) -> Customer:
        """Create a verified, active customer with an unusable random password."""
        return Customer.objects.create(
            first_name=first_name or ramlink_settings.DEFAULT_FIRST_NAME,
            last_name=last_name or ramlink_settings.DEFAULT_LAST_NAME,
            email=email or None,
            password=make_password(secrets.token_hex(16)),
            channel=context.channel,
            group=context.customer_group,
            is_verified=True,
            is_active=True,
        )
