import django.db.models.deletion
import django.utils.timezone
import uuid
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='AdminAuditLog',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('action_type', models.CharField(choices=[('console_login', 'Console Sign-in'), ('user_suspend', 'User Suspension'), ('user_unsuspend', 'User Unsuspension'), ('user_ban', 'Permanent Ban'), ('artist_level', 'Artist Tier Change'), ('admin_grant', 'Admin Role Granted'), ('admin_revoke', 'Admin Role Revoked'), ('report_innocent', 'Report Dismissed'), ('report_guilty', 'Report Upheld'), ('guilty_delete', 'Guilty Record Deleted'), ('song_transition', 'Song Status Change'), ('np_adjust', 'NP Adjustment'), ('application_approve', 'Application Approved'), ('application_reject', 'Application Rejected'), ('application_reapply', 'Application Reopened'), ('application_discard', 'Application Discarded'), ('contact_resolve', 'Contact Message Resolved'), ('contact_delete', 'Contact Message Deleted')], max_length=50)),
                ('description', models.TextField()),
                ('target_object_type', models.CharField(blank=True, max_length=50)),
                ('target_object_id', models.CharField(blank=True, max_length=100)),
                ('metadata', models.JSONField(blank=True, default=dict)),
                ('ip_address', models.GenericIPAddressField(blank=True, null=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('admin_user', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='admin_audit_logs', to=settings.AUTH_USER_MODEL)),
                ('target_user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='admin_actions_received', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['admin_user', '-created_at'], name='audit_admin_created_idx'),
                    models.Index(fields=['action_type', '-created_at'], name='audit_action_created_idx'),
                ],
            },
        ),
    ]
