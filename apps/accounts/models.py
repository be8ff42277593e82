# apps/accounts/models.py

from django.contrib.auth.models import AbstractUser, UserManager
from django.conf import settings
from django.db import models
from django.utils import timezone
from django.core.validators import MinValueValidator
import uuid

from algorithms import suspension as rules


class User(AbstractUser):
    """Platform account as seen by the admin console"""

    ARTIST_LEVELS = settings.NADA_SETTINGS['ARTIST_LEVELS']

    APPLICATION_STATUS = (
        ('', 'None'),
        ('pending', 'Pending'),
        ('rejected', 'Rejected'),
    )

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True)
    nickname = models.CharField(max_length=50, blank=True, db_index=True)
    profile_image_url = models.URLField(max_length=500, blank=True)

    # NP wallet
    np_balance = models.IntegerField(default=0, validators=[MinValueValidator(0)])

    # Roles
    is_admin = models.BooleanField(default=False)
    is_artist = models.BooleanField(default=False)
    artist_level = models.CharField(max_length=20, choices=ARTIST_LEVELS, default='rookie')
    artist_application_status = models.CharField(
        max_length=20,
        choices=APPLICATION_STATUS,
        default='',
        blank=True
    )
    application_rejected_at = models.DateTimeField(null=True, blank=True)

    # Suspension
    suspended_until = models.DateTimeField(null=True, blank=True)
    is_permanently_banned = models.BooleanField(default=False)
    suspension_count = models.PositiveIntegerField(default=0)

    # Timestamps
    created_at = models.DateTimeField(default=timezone.now)
    last_active = models.DateTimeField(null=True, blank=True)

    objects = UserManager()

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['is_artist', 'artist_level'], name='accounts_artist_level_idx'),
            models.Index(fields=['suspended_until'], name='accounts_suspended_idx'),
        ]

    def __str__(self):
        return self.display_name

    @property
    def display_name(self):
        return self.nickname or self.username

    @property
    def is_admin_user(self):
        """Console access: admin flag, or superuser"""
        return self.is_superuser or self.is_admin

    @property
    def is_suspension_recorded(self):
        """Has any suspension on record, lapsed or not"""
        return self.suspended_until is not None or self.is_permanently_banned

    def get_suspension_status(self, now=None):
        """normal / suspended / expired / banned, evaluated at read time"""
        return rules.suspension_status(
            self.suspended_until,
            self.is_permanently_banned,
            now or timezone.now()
        )

    @property
    def suspension_status(self):
        return self.get_suspension_status()

    @property
    def is_restricted(self):
        return rules.is_restricted(self.get_suspension_status())

    def suspend(self, duration, now=None):
        """Suspend for a duration key ('1d', ...) or permanently"""
        now = now or timezone.now()

        if duration == rules.PERMANENT:
            self.is_permanently_banned = True
            self.suspended_until = None
        else:
            self.suspended_until = rules.suspension_expiry(duration, now)
            self.is_permanently_banned = False

        self.suspension_count += 1
        self.save(update_fields=['suspended_until', 'is_permanently_banned', 'suspension_count'])

    def ban_permanently(self):
        """Escalate an existing suspension to permanent"""
        self.is_permanently_banned = True
        self.save(update_fields=['is_permanently_banned'])

    def lift_suspension(self):
        """Unban, whether the suspension was timed or permanent"""
        self.suspended_until = None
        self.is_permanently_banned = False
        self.save(update_fields=['suspended_until', 'is_permanently_banned'])

    def set_artist_level(self, level):
        if level not in dict(self.ARTIST_LEVELS):
            raise ValueError(f"Unknown artist level: {level!r}")
        self.artist_level = level
        self.save(update_fields=['artist_level'])

    def get_fan_count(self):
        if not self.is_artist:
            return None
        return self.fans.count()


class Fan(models.Model):
    """A user following an artist"""

    fan = models.ForeignKey(User, on_delete=models.CASCADE, related_name='following_artists')
    artist = models.ForeignKey(User, on_delete=models.CASCADE, related_name='fans')

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        unique_together = ('fan', 'artist')
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.fan} is a fan of {self.artist}"

    def save(self, *args, **kwargs):
        if self.fan_id == self.artist_id:
            raise ValueError("Users cannot be their own fan")
        super().save(*args, **kwargs)


class LoginHistory(models.Model):
    """Console sign-in sessions"""

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='login_history')
    ip_address = models.GenericIPAddressField(null=True, blank=True)
    user_agent = models.TextField(blank=True)
    session_key = models.CharField(max_length=40, blank=True)

    login_time = models.DateTimeField(default=timezone.now)
    logout_time = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ['-login_time']
        indexes = [
            models.Index(fields=['user', '-login_time'], name='accounts_login_user_idx'),
        ]

    def __str__(self):
        return f"{self.user} - {self.login_time}"

    @property
    def is_open(self):
        return self.logout_time is None

    def close(self):
        if self.logout_time is None:
            self.logout_time = timezone.now()
            self.save(update_fields=['logout_time'])
