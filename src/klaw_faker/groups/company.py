"""Company capability group."""

from __future__ import annotations

from klaw_faker.groups._base import Group

__all__ = ['CompanyGroup']


class CompanyGroup(Group):
    def company(self) -> str:
        """Example: ``'Acme Ltd'``."""
        return self._faker.company()

    def company_suffix(self) -> str:
        """Example: ``'Ltd'``."""
        return self._faker.company_suffix()

    def job_title(self) -> str:
        """Example: ``'Cashier'``."""
        return self._faker.job()

    def catch_phrase(self) -> str:
        """Example: ``'Monitored regional contingency'``."""
        return self._faker.catch_phrase()

    def bs(self) -> str:
        """Example: ``'e-enable robust architectures'``."""
        return self._faker.bs()
