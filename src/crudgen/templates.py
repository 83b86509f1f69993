"""Blueprints for the Go files generated for an entity.

Bodies are plain text with ``{{ pascal }}``, ``{{ camel }}``, ``{{ lower }}`` and
``{{ kebab }}`` placeholders, see :class:`crudgen.naming.NameForms`.
"""

from __future__ import annotations

from .scaffold import ScaffoldTaskSpec

__all__ = [
    "CONTROLLER_PATH",
    "CONTROLLER_TEMPLATE",
    "REPOSITORY_PATH",
    "REPOSITORY_TEMPLATE",
    "REQUEST_PATH",
    "REQUEST_TEMPLATE",
    "SERVICE_PATH",
    "SERVICE_TEMPLATE",
    "default_registry",
]


CONTROLLER_DIR = "internal/transport/http/rest/controller/v1"

REPOSITORY_PATH = "internal/transport/repository/postgres/{{ camel }}.go"
SERVICE_PATH = "internal/service/{{ camel }}.go"
CONTROLLER_PATH = CONTROLLER_DIR + "/{{ camel }}/controller.go"
REQUEST_PATH = CONTROLLER_DIR + "/{{ camel }}/request.go"

REPOSITORY_TEMPLATE = """package postgres

import (
	"git.snapp.ninja/search-and-discovery/framework/pkg/ports"
	dto "git.snapp.ninja/snappshop/delivery/harley/internal/DTO"
	"git.snapp.ninja/snappshop/delivery/harley/internal/transport/repository"
)

type {{ camel }}Repository struct {
	repository.GenericRepository[dto.{{ pascal }}]
	db  ports.Database
	log ports.LoggerWithTraceID
}

func New{{ pascal }}Repository(db ports.Database, log ports.LoggerWithTraceID) repository.{{ pascal }} {
	return &{{ camel }}Repository{
		GenericRepository: repository.NewGenericRepository[dto.{{ pascal }}](db, log),
		db:                db,
		log:               log,
	}
}
"""

SERVICE_TEMPLATE = """package service

import (
	"context"

	"git.snapp.ninja/search-and-discovery/framework/pkg/ports"
	dto "git.snapp.ninja/snappshop/delivery/harley/internal/DTO"
	"git.snapp.ninja/snappshop/delivery/harley/internal/transport/repository"
)

type {{ pascal }} interface {
	Get{{ pascal }}ByID(ctx context.Context, id int64) (dto.{{ pascal }}, error)
	Update{{ pascal }}(ctx context.Context, {{ camel }} dto.{{ pascal }}) (dto.{{ pascal }}, error)
	Create{{ pascal }}(ctx context.Context, {{ camel }} dto.{{ pascal }}) (dto.{{ pascal }}, error)
	Delete{{ pascal }}(ctx context.Context, id int64) error
	GetPaginated{{ pascal }}s(ctx context.Context, pagination dto.Pagination) ([]dto.{{ pascal }}, *dto.Pagination, error)
}

type {{ camel }}Service struct {
	log              ports.LoggerWithTraceID
	{{ camel }}Repository repository.{{ pascal }}
}

func New{{ pascal }}Service(log ports.LoggerWithTraceID, {{ camel }}Repository repository.{{ pascal }}) {{ pascal }} {
	return &{{ camel }}Service{
		log:              log,
		{{ camel }}Repository: {{ camel }}Repository,
	}
}

func (s *{{ camel }}Service) Get{{ pascal }}ByID(ctx context.Context, id int64) (dto.{{ pascal }}, error) {
	{{ camel }}, err := s.{{ camel }}Repository.GetByID(ctx, id)
	if err != nil {
		return dto.{{ pascal }}{}, err
	}
	return {{ camel }}, nil
}

func (s *{{ camel }}Service) Update{{ pascal }}(ctx context.Context, {{ camel }} dto.{{ pascal }}) (dto.{{ pascal }}, error) {
	err := s.{{ camel }}Repository.Update(ctx, &{{ camel }})
	if err != nil {
		return dto.{{ pascal }}{}, err
	}
	return {{ camel }}, nil
}

func (s *{{ camel }}Service) Create{{ pascal }}(ctx context.Context, {{ camel }} dto.{{ pascal }}) (dto.{{ pascal }}, error) {
	err := s.{{ camel }}Repository.Create(ctx, &{{ camel }})
	if err != nil {
		return dto.{{ pascal }}{}, err
	}
	return {{ camel }}, nil
}

func (s *{{ camel }}Service) Delete{{ pascal }}(ctx context.Context, id int64) error {
	err := s.{{ camel }}Repository.Delete(ctx, id)
	if err != nil {
		return err
	}
	return nil
}

func (s *{{ camel }}Service) GetPaginated{{ pascal }}s(ctx context.Context, pagination dto.Pagination) ([]dto.{{ pascal }}, *dto.Pagination, error) {
	{{ camel }}s, resultPagination, err := s.{{ camel }}Repository.FindAll(ctx, pagination)
	if err != nil {
		return nil, nil, err
	}
	return {{ camel }}s, resultPagination, nil
}
"""

CONTROLLER_TEMPLATE = """package {{ lower }}

import (
	"errors"

	"git.snapp.ninja/search-and-discovery/framework/pkg/adapters/errorUtil/appErr"
	"git.snapp.ninja/search-and-discovery/framework/pkg/ports"
	dto "git.snapp.ninja/snappshop/delivery/harley/internal/DTO"
	"git.snapp.ninja/snappshop/delivery/harley/internal/consts"
	"git.snapp.ninja/snappshop/delivery/harley/internal/service"
	"git.snapp.ninja/snappshop/delivery/harley/internal/transport/http/rest/httpUtils"
	"git.snapp.ninja/snappshop/delivery/harley/internal/transport/http/rest/validator"
	"git.snapp.ninja/snappshop/delivery/harley/internal/utils"
	"go.elastic.co/apm"
)

type {{ pascal }} interface {
	GetPaginated{{ pascal }}s(c *ports.HttpContext) error
	Create{{ pascal }}(c *ports.HttpContext) error
	Get{{ pascal }}ByID(c *ports.HttpContext) error
	Update{{ pascal }}(c *ports.HttpContext) error
	Delete{{ pascal }}(c *ports.HttpContext) error
}

type {{ camel }}Controller struct {
	{{ camel }}Service    service.{{ pascal }}
	customValidation validator.CustomValidation
	log              ports.LoggerWithTraceID
}

func New(log ports.LoggerWithTraceID, {{ camel }}Service service.{{ pascal }}, customValidation validator.CustomValidation) {{ pascal }} {
	return &{{ camel }}Controller{
		{{ camel }}Service:    {{ camel }}Service,
		customValidation: customValidation,
		log:              log,
	}
}

// @Summary		Create a {{ pascal }}
// @Description	This route will create a {{ lower }}
// @Tags			{{ pascal }}
// @Accept			json
// @Produce		json
// @Param			body	body		create{{ pascal }}Request 	true	"Create {{ pascal }} request"
// @Success		201		{object}	ports.Response{data=dto.{{ pascal }}}
// @Failure		400		{object}	ports.ErrorDetails
// @Failure		422		{object}	ports.ErrorDetails
// @Failure		500		{object}	ports.ErrorDetails
// @Router			/api/v1/{{ kebab }}/ [post]
func (ctrl *{{ camel }}Controller) Create{{ pascal }}(c *ports.HttpContext) error {
	span, ctx := apm.StartSpan(c.Context(), "Create{{ pascal }}", "controller")
	defer span.End()

	var inputRequest create{{ pascal }}Request
	if err := c.BodyParser(&inputRequest); err != nil {
		ctrl.log.Error(ctx, err.Error())
		return appErr.NewBadRequestErr(err)
	}

	validationErrs := ctrl.customValidation.ValidateStruct(inputRequest)
	if validationErrs != nil {
		return utils.WithFieldErrors(
			appErr.NewBadRequestErr(errors.New(consts.ErrValidationFailedMsg)),
			validationErrs...,
		)
	}
	
	// TODO: Map inputRequest to a dto.{{ pascal }} struct.
	// Example:
	// entityDto := dto.{{ pascal }}{
	// 	Name: inputRequest.Name,
	// }
	var entityDto dto.{{ pascal }}


	createdEntity, err := ctrl.{{ camel }}Service.Create{{ pascal }}(ctx, entityDto)
	if err != nil {
		return err
	}

	return c.Status(201).JSON(ports.Response{
		Status: true,
		Data:   createdEntity,
	})
}

// @Summary		Get {{ pascal }} by ID
// @Description	This route will fetch a specific {{ lower }} by its ID
// @Tags			{{ pascal }}
// @Accept			json
// @Produce		json
// @Param			id	path		int	true	"{{ pascal }} ID"
// @Success		200	{object}	ports.Response{data=dto.{{ pascal }}}
// @Failure		400	{object}	ports.ErrorDetails
// @Failure		404	{object}	ports.ErrorDetails
// @Failure		500	{object}	ports.ErrorDetails
// @Router			/api/v1/{{ kebab }}/{id} [get]
func (ctrl *{{ camel }}Controller) Get{{ pascal }}ByID(c *ports.HttpContext) error {
	span, ctx := apm.StartSpan(c.Context(), "Get{{ pascal }}ByID", "controller")
	defer span.End()

	id, err := c.ParamsInt("id")
	if err != nil {
		return appErr.NewBadRequestErr(err)
	}

	entity, err := ctrl.{{ camel }}Service.Get{{ pascal }}ByID(ctx, int64(id))
	if err != nil {
		return err
	}

	return c.JSON(ports.Response{
		Status: true,
		Data:   entity,
	})
}

// @Summary		Update a {{ pascal }}
// @Description	This route will update a {{ lower }}
// @Tags			{{ pascal }}
// @Accept			json
// @Produce		json
// @Param			id		path		int	true	"{{ pascal }} ID"
// @Param			body	body		update{{ pascal }}Request 	true	"Update {{ pascal }} request"
// @Success		200		{object}	ports.Response{data=dto.{{ pascal }}}
// @Failure		400		{object}	ports.ErrorDetails
// @Failure		422		{object}	ports.ErrorDetails
// @Failure		500		{object}	ports.ErrorDetails
// @Router			/api/v1/{{ kebab }}/{id} [put]
func (ctrl *{{ camel }}Controller) Update{{ pascal }}(c *ports.HttpContext) error {
	span, ctx := apm.StartSpan(c.Context(), "Update{{ pascal }}", "controller")
	defer span.End()

	id, err := c.ParamsInt("id")
	if err != nil {
		return appErr.NewBadRequestErr(err)
	}

	var inputRequest update{{ pascal }}Request
	if err := c.BodyParser(&inputRequest); err != nil {
		ctrl.log.Error(ctx, err.Error())
		return appErr.NewBadRequestErr(err)
	}

	validationErrs := ctrl.customValidation.ValidateStruct(inputRequest)
	if validationErrs != nil {
		return utils.WithFieldErrors(
			appErr.NewBadRequestErr(errors.New(consts.ErrValidationFailedMsg)),
			validationErrs...,
		)
	}
	
	// TODO: Map inputRequest to a dto.{{ pascal }} struct.
	// Example:
	// entityDto := dto.{{ pascal }}{
	// 	Name: inputRequest.Name,
	// }
	var entityDto dto.{{ pascal }}
	entityDto.ID = int64(id) // Set ID from path

	result, err := ctrl.{{ camel }}Service.Update{{ pascal }}(ctx, entityDto)
	if err != nil {
		return err
	}

	return c.JSON(ports.Response{
		Status: true,
		Data:   result,
	})
}

// @Summary		Delete a {{ pascal }}
// @Description	This route will delete a {{ lower }}
// @Tags			{{ pascal }}
// @Accept			json
// @Produce		json
// @Param			id	path		int	true	"{{ pascal }} ID"
// @Success		204
// @Failure		400	{object}	ports.ErrorDetails
// @Failure		500	{object}	ports.ErrorDetails
// @Router			/api/v1/{{ kebab }}/{id} [delete]
func (ctrl *{{ camel }}Controller) Delete{{ pascal }}(c *ports.HttpContext) error {
	span, ctx := apm.StartSpan(c.Context(), "Delete{{ pascal }}", "controller")
	defer span.End()

	id, err := c.ParamsInt("id")
	if err != nil {
		return appErr.NewBadRequestErr(err)
	}

	err = ctrl.{{ camel }}Service.Delete{{ pascal }}(ctx, int64(id))
	if err != nil {
		return err
	}

	return c.SendStatus(204)
}

// @Summary		Get All {{ pascal }}s
// @Description	Get all paginated {{ lower }}s
// @Tags			{{ pascal }}
// @Accept			json
// @Produce		json
// @Param			params	query		httpUtils.ListRequest	false	"Pagination and filter parameters"
// @Success		200		{object}	ports.Response{data=[]dto.{{ pascal }}}
// @Failure		400	{object}	ports.ErrorDetails
// @Failure		500	{object}	ports.ErrorDetails
// @Router			/api/v1/{{ kebab }}/ [get]
func (ctrl *{{ camel }}Controller) GetPaginated{{ pascal }}s(c *ports.HttpContext) error {
	span, ctx := apm.StartSpan(c.Context(), "GetPaginated{{ pascal }}s", "controller")
	defer span.End()
	
	// IMPORTANT: Define your filterable and sortable columns here
	columnMapping := map[string]string{
		// "fieldNameInQuery": "db_column_name",
		// "name": "title",
	}

	pagination, err := httpUtils.ParseAndValidatePagination(ctx, c, ctrl.customValidation, ctrl.log, columnMapping)
	if err != nil {
		return err
	}

	paginatedResult, resultPagination, err := ctrl.{{ camel }}Service.GetPaginated{{ pascal }}s(ctx, pagination)
	if err != nil {
		return err
	}

	resp := ports.Response{
		Data: paginatedResult,
		Meta: &ports.Meta{
			Pagination: &resultPagination.Pagination,
		},
	}

	return c.JSON(resp)
}
"""

REQUEST_TEMPLATE = """package {{ lower }}

type create{{ pascal }}Request struct {
	// TODO: Add fields for creating a new {{ pascal }}.
	// Example:
	// Name string `json:"name" validate:"required"`
}

type update{{ pascal }}Request struct {
	// TODO: Add fields for updating an existing {{ pascal }}.
	// Example:
	// Name string `json:"name" validate:"required"`
}
"""


def default_registry() -> tuple[ScaffoldTaskSpec, ...]:
    """Return the blueprints in generation order."""

    return (
        ScaffoldTaskSpec(name="repository", path_template=REPOSITORY_PATH, body_template=REPOSITORY_TEMPLATE),
        ScaffoldTaskSpec(name="service", path_template=SERVICE_PATH, body_template=SERVICE_TEMPLATE),
        ScaffoldTaskSpec(name="controller", path_template=CONTROLLER_PATH, body_template=CONTROLLER_TEMPLATE),
        ScaffoldTaskSpec(name="request", path_template=REQUEST_PATH, body_template=REQUEST_TEMPLATE),
    )
