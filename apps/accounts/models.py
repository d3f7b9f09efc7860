from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models


class UserRole(models.TextChoices):
    STAFF = 'staff', 'Staff'
    ADMIN = 'admin', 'Admin'
    SUPER_ADMIN = 'super_admin', 'Super admin'


class UserManager(BaseUserManager):
    """Custom user manager for username-based authentication."""
    
    def create_user(self, username, password=None, **extra_fields):
        if not username:
            raise ValueError('Username is required')
        
        username = self.model.normalize_username(username)
        user = self.model(username=username, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user
    
    def create_superuser(self, username, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('role', UserRole.SUPER_ADMIN)
        
        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True')
        
        return self.create_user(username, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    """Back-office user: cashier, manager or owner."""
    
    username = models.CharField(max_length=150, unique=True, db_index=True)
    full_name = models.CharField(max_length=150, blank=True)
    role = models.CharField(
        max_length=20,
        choices=UserRole.choices,
        default=UserRole.STAFF
    )
    
    # Permissions
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)
    
    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    last_login = models.DateTimeField(null=True, blank=True)
    
    objects = UserManager()
    
    USERNAME_FIELD = 'username'
    REQUIRED_FIELDS = []
    
    class Meta:
        db_table = 'users'
        ordering = ['username']
    
    def __str__(self):
        return self.username
    
    def get_display_name(self):
        """Return full name or username."""
        return self.full_name or self.username
    
    @property
    def is_admin(self):
        return self.role in (UserRole.ADMIN, UserRole.SUPER_ADMIN)
    
    @property
    def is_super_admin(self):
        return self.role == UserRole.SUPER_ADMIN
