from django.contrib import admin
from .models import Doctor, Patient, Disease, Video, PatientComment


@admin.register(Doctor)
class DoctorAdmin(admin.ModelAdmin):
    list_display = ['__str__', 'specialty', 'user', 'created_at']
    list_filter = ['specialty']
    search_fields = ['user__email', 'user__first_name', 'user__last_name', 'specialty']
    readonly_fields = ['id', 'created_at', 'updated_at']
    autocomplete_fields = ['user']


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ['__str__', 'user', 'created_at']
    search_fields = ['user__email', 'user__first_name', 'user__last_name']
    readonly_fields = ['id', 'created_at', 'updated_at']
    autocomplete_fields = ['user']


@admin.register(Disease)
class DiseaseAdmin(admin.ModelAdmin):
    list_display = ['name', 'doctor', 'created_at']
    search_fields = ['name']
    readonly_fields = ['id', 'created_at', 'updated_at']
    autocomplete_fields = ['doctor']


@admin.register(Video)
class VideoAdmin(admin.ModelAdmin):
    list_display = ['title', 'type', 'doctor', 'created_at']
    list_filter = ['type']
    search_fields = ['title']
    readonly_fields = ['id', 'created_at', 'updated_at']
    autocomplete_fields = ['doctor']


@admin.register(PatientComment)
class PatientCommentAdmin(admin.ModelAdmin):
    list_display = ['patient', 'doctor', 'created_at']
    search_fields = ['patient__user__email', 'doctor__user__email']
    readonly_fields = ['id', 'created_at', 'updated_at']
    autocomplete_fields = ['doctor', 'patient']
