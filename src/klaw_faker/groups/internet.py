"""Internet capability group."""

from __future__ import annotations

from klaw_faker.groups._base import Group

__all__ = ['InternetGroup']


class InternetGroup(Group):
    def email(self) -> str:
        """Example: ``'tkshlerin@collins.com'``."""
        return self._faker.email()

    def safe_email(self) -> str:
        """Example: ``'king.alford@example.org'``."""
        return self._faker.safe_email()

    def free_email(self) -> str:
        """Example: ``'bradley72@gmail.com'``."""
        return self._faker.free_email()

    def company_email(self) -> str:
        """Example: ``'russel.durward@mcdermott.org'``."""
        return self._faker.company_email()

    def free_email_domain(self) -> str:
        """Example: ``'yahoo.com'``."""
        return self._faker.free_email_domain()

    def safe_email_domain(self) -> str:
        """Example: ``'example.org'``."""
        return self._faker.safe_domain_name()

    def user_name(self) -> str:
        """Example: ``'wade55'``."""
        return self._faker.user_name()

    def password(
        self,
        length: int = 10,
        special_chars: bool = True,
        digits: bool = True,
        upper_case: bool = True,
        lower_case: bool = True,
    ) -> str:
        """Example: ``'k&|X+a45*2'``."""
        return self._faker.password(length, special_chars, digits, upper_case, lower_case)

    def domain_name(self) -> str:
        """Example: ``'wolffdeckow.net'``."""
        return self._faker.domain_name()

    def domain_word(self) -> str:
        """Example: ``'feeney'``."""
        return self._faker.domain_word()

    def tld(self) -> str:
        """Example: ``'com'``."""
        return self._faker.tld()

    def url(self) -> str:
        """Example: ``'http://www.skilesdonnelly.biz/aut-accusantium-ut-architecto-sit-et.html'``."""
        return self._faker.url()

    def slug(self) -> str:
        """Example: ``'aut-repellat-commodi-vel-itaque-nihil-id-saepe-nostrum'``."""
        return self._faker.slug()

    def ipv4(self) -> str:
        """Example: ``'109.133.32.252'``."""
        return self._faker.ipv4()

    def local_ipv4(self) -> str:
        """Example: ``'10.242.58.8'``."""
        return self._faker.ipv4_private()

    def ipv6(self) -> str:
        """Example: ``'8e65:933d:22ee:a232:f1c1:2741:1f10:117c'``."""
        return self._faker.ipv6()

    def mac_address(self) -> str:
        """Example: ``'43:85:b7:08:10:ca'``."""
        return self._faker.mac_address()
