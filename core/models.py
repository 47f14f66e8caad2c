from django.db import models
from django.db.models import Sum
from django.contrib.auth.models import AbstractUser


class StartupStage(models.TextChoices):
    """Startup stages, in progression order."""
    IDEA = 'idea', 'Idea'
    MVP = 'mvp', 'MVP'
    USERS = 'users', 'First Users'
    REVENUE = 'revenue', 'Revenue'
    SCALING = 'scaling', 'Scaling'


class Category(models.TextChoices):
    """Industry categories shared by posts, jobs and pods."""
    TECH = 'tech', 'Tech'
    HEALTH = 'health', 'Health'
    FINANCE = 'finance', 'Finance'
    EDUCATION = 'education', 'Education'
    ECOMMERCE = 'ecommerce', 'E-commerce'
    AI = 'ai', 'AI'
    SUSTAINABILITY = 'sustainability', 'Sustainability'
    OTHER = 'other', 'Other'


class User(AbstractUser):
    """Custom User model: a founder or investor account on Foundic."""

    class Role(models.TextChoices):
        FOUNDER = 'founder', 'Founder'
        INVESTOR = 'investor', 'Investor'
        ADMIN = 'admin', 'Admin'

    class Experience(models.TextChoices):
        BEGINNER = 'beginner', 'Beginner'
        INTERMEDIATE = 'intermediate', 'Intermediate'
        EXPERT = 'expert', 'Expert'

    class RiskTolerance(models.TextChoices):
        CONSERVATIVE = 'conservative', 'Conservative'
        MODERATE = 'moderate', 'Moderate'
        AGGRESSIVE = 'aggressive', 'Aggressive'

    class WorkStyle(models.TextChoices):
        STRUCTURED = 'structured', 'Structured'
        FLEXIBLE = 'flexible', 'Flexible'
        HYBRID = 'hybrid', 'Hybrid'

    class CommunicationStyle(models.TextChoices):
        DIRECT = 'direct', 'Direct'
        DIPLOMATIC = 'diplomatic', 'Diplomatic'
        COLLABORATIVE = 'collaborative', 'Collaborative'

    class InvestorType(models.TextChoices):
        ANGEL = 'angel', 'Angel'
        VC = 'vc', 'Venture Capital'
        CORPORATE = 'corporate', 'Corporate'
        FAMILY_OFFICE = 'family_office', 'Family Office'

    email = models.EmailField(unique=True)
    name = models.CharField(max_length=255)
    role = models.CharField(
        max_length=10,
        choices=Role.choices,
        default=Role.FOUNDER,
        db_index=True,
    )
    bio = models.CharField(max_length=500, blank=True)
    location = models.CharField(max_length=255, blank=True)
    avatar_url = models.URLField(blank=True)
    skills = models.JSONField(default=list, blank=True)
    experience = models.CharField(
        max_length=20,
        choices=Experience.choices,
        default=Experience.BEGINNER,
        blank=True,
    )

    # Founder-specific fields
    startup_name = models.CharField(max_length=255, blank=True)
    startup_description = models.TextField(blank=True)
    startup_stage = models.CharField(
        max_length=10,
        choices=StartupStage.choices,
        default=StartupStage.IDEA,
        blank=True,
    )
    startup_industry = models.CharField(max_length=100, blank=True)
    startup_website = models.URLField(blank=True)

    # Investor-specific fields
    investor_type = models.CharField(
        max_length=20,
        choices=InvestorType.choices,
        blank=True,
    )
    investment_min = models.PositiveIntegerField(null=True, blank=True)
    investment_max = models.PositiveIntegerField(null=True, blank=True)
    focus_areas = models.JSONField(default=list, blank=True)

    # Mindset ("DNA match") fields
    risk_tolerance = models.CharField(
        max_length=20,
        choices=RiskTolerance.choices,
        default=RiskTolerance.MODERATE,
        blank=True,
    )
    work_style = models.CharField(
        max_length=20,
        choices=WorkStyle.choices,
        default=WorkStyle.HYBRID,
        blank=True,
    )
    communication_style = models.CharField(
        max_length=20,
        choices=CommunicationStyle.choices,
        default=CommunicationStyle.COLLABORATIVE,
        blank=True,
    )

    # F-Coin balance; only PointsLedger writes it
    points = models.PositiveIntegerField(default=0, db_index=True)

    is_verified = models.BooleanField(default=False)
    is_banned = models.BooleanField(default=False)
    last_active_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'core_user'
        verbose_name = 'User'
        verbose_name_plural = 'Users'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name or self.username} ({self.role})"

    @property
    def is_founder(self):
        return self.role == self.Role.FOUNDER

    @property
    def is_investor(self):
        return self.role == self.Role.INVESTOR

    @property
    def is_platform_admin(self):
        return self.role == self.Role.ADMIN or self.is_staff

    def history_total(self) -> int:
        """Sum of every point delta ever recorded for this account."""
        return self.point_transactions.aggregate(total=Sum('amount'))['total'] or 0

    def as_public_dict(self) -> dict:
        """Profile fields safe to show to any visitor."""
        data = {
            'id': self.pk,
            'name': self.name,
            'username': self.username,
            'role': self.role,
            'bio': self.bio,
            'location': self.location,
            'avatar_url': self.avatar_url,
            'skills': self.skills,
            'experience': self.experience,
            'mindset': {
                'risk_tolerance': self.risk_tolerance,
                'work_style': self.work_style,
                'communication_style': self.communication_style,
            },
            'points': self.points,
            'is_verified': self.is_verified,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
        if self.is_founder:
            data['startup'] = {
                'name': self.startup_name,
                'description': self.startup_description,
                'stage': self.startup_stage,
                'industry': self.startup_industry,
                'website': self.startup_website,
            }
        if self.is_investor:
            data['investor'] = {
                'type': self.investor_type,
                'investment_min': self.investment_min,
                'investment_max': self.investment_max,
                'focus_areas': self.focus_areas,
            }
        return data

    def as_private_dict(self) -> dict:
        """Public profile plus fields only the owner sees."""
        data = self.as_public_dict()
        data['email'] = self.email
        return data

    def as_summary(self) -> dict:
        return {
            'id': self.pk,
            'name': self.name,
            'avatar_url': self.avatar_url,
            'startup_name': self.startup_name,
        }


class PointTransaction(models.Model):
    """One signed F-Coin delta in an account's append-only point history."""

    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='point_transactions',
    )
    amount = models.IntegerField()
    action = models.CharField(max_length=50)
    description = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'core_point_transaction'
        verbose_name = 'Point Transaction'
        verbose_name_plural = 'Point Transactions'
        ordering = ['created_at', 'id']

    def __str__(self):
        return f"{self.user.username}: {self.amount:+d} ({self.action})"

    def as_dict(self) -> dict:
        return {
            'id': self.pk,
            'amount': self.amount,
            'action': self.action,
            'description': self.description,
            'created_at': self.created_at.isoformat(),
        }
